"""
data_model/errors.py — kody błędów i wyjątki ilnlp.

Wszystkie wyjątki dziedziczą po IlnlpError i niosą stały kod (ErrorCode),
żeby warstwa CLI mogła raportować klasę błędu bez parsowania komunikatu.

Rdzeń tylko podnosi wyjątki; łapie je wyłącznie warstwa orkiestracji
(komendy ilnlp), która wypisuje komunikat i kończy proces.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stałe kody błędów."""

    # rejestr literałów
    INVALID_LITERAL    = "E_INVALID_LITERAL"

    # zewnętrzny solver ASP
    NO_MODEL           = "E_NO_MODEL"
    SOLVER             = "E_SOLVER"

    # zgodność przykładów (warunki i–iii)
    INCOMPATIBLE_I     = "E_INCOMPATIBLE_I"
    INCOMPATIBLE_II    = "E_INCOMPATIBLE_II"
    INCOMPATIBLE_III   = "E_INCOMPATIBLE_III"

    # współpracownicy: parser, szablon, ILASP
    PARSE              = "E_PARSE"
    RENDER             = "E_RENDER"
    ILASP              = "E_ILASP"


class IlnlpError(Exception):
    """Bazowy wyjątek; `code` identyfikuje klasę błędu."""

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidLiteralError(IlnlpError):
    """Identyfikator literału nie został przydzielony przez rejestr."""

    code = ErrorCode.INVALID_LITERAL

    def __init__(self, lit: int) -> None:
        super().__init__(f"Nieprawidłowy literał: {lit}")
        self.lit = lit


class NoModelError(IlnlpError):
    """Solver nie zwrócił żadnego modelu w zadanym limicie."""

    code = ErrorCode.NO_MODEL

    def __init__(self) -> None:
        super().__init__("Nie znaleziono modelu")


class SolverError(IlnlpError):
    """Błąd zgłoszony przez clingo (składnia programu, grounding, solve)."""

    code = ErrorCode.SOLVER

    def __init__(self, message: str, messages: list[str] | None = None) -> None:
        super().__init__(f"Błąd clingo: {message}")
        self.messages = messages or []


class IncompatibleError(IlnlpError):
    """
    Para przykładów stawia teorii tła sprzeczne wymagania.

    - condition: numer naruszonego warunku ("i", "ii", "iii")
    - first:     indeks pierwszego przykładu pary (0-based)
    - second:    indeks drugiego przykładu pary (0-based)
    """

    condition: str

    def __init__(self, first: int, second: int) -> None:
        super().__init__(
            f"Niezgodność dla warunku ({self.condition}) "
            f"między przykładami {first + 1} i {second + 1}"
        )
        self.first = first
        self.second = second


class IncompatibleOneError(IncompatibleError):
    code = ErrorCode.INCOMPATIBLE_I
    condition = "i"


class IncompatibleTwoError(IncompatibleError):
    code = ErrorCode.INCOMPATIBLE_II
    condition = "ii"


class IncompatibleThreeError(IncompatibleError):
    code = ErrorCode.INCOMPATIBLE_III
    condition = "iii"


class ParseError(IlnlpError):
    """Nieparsowalna treść pliku zadania; line/column są 1-based."""

    code = ErrorCode.PARSE

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class RenderError(IlnlpError):
    """Błąd szablonu przy renderowaniu zadania indukcji."""

    code = ErrorCode.RENDER


class IlaspError(IlnlpError):
    """ILASP zakończył się błędem lub nie dał się uruchomić."""

    code = ErrorCode.ILASP

    def __init__(self, message: str, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
