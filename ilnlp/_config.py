"""Konfiguracja ilnlp przez zmienne środowiskowe (flagi CLI mają pierwszeństwo)."""

from __future__ import annotations

import os
import pathlib
import shlex
from dataclasses import dataclass, field


@dataclass(slots=True)
class Settings:
    """
    - ilasp:      ścieżka/nazwa pliku wykonywalnego ILASP     (ILNLP_ILASP)
    - ilasp_args: dodatkowe argumenty ILASP, dzielone jak w shellu (ILNLP_ILASP_ARGS)
    - template:   domyślny szablon programu ILASP            (ILNLP_TEMPLATE)
    """
    ilasp:      str = "ILASP"
    ilasp_args: list[str] = field(default_factory=list)
    template:   pathlib.Path | None = None


def get_settings() -> Settings:
    template = os.getenv("ILNLP_TEMPLATE")
    return Settings(
        ilasp      = os.getenv("ILNLP_ILASP", "ILASP"),
        ilasp_args = shlex.split(os.getenv("ILNLP_ILASP_ARGS", "")),
        template   = pathlib.Path(template) if template else None,
    )
