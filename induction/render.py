"""
induction/render.py — renderowanie zadania indukcji do programu ILASP.

Szablon (jinja2) dostaje dane z InductionTask.to_context():
  pos_examples, neg_examples  — listy {"incl": [...], "excl": [...], "ctx": [...]}
  search_space                — {"positive_body": [...], "general_body": [...], "head": [...]}
  background                  — reguły tła w postaci tekstowej

Domyślny szablon: induction/templates/ilasp.las.
"""

from __future__ import annotations

import pathlib

from jinja2 import Environment, StrictUndefined, TemplateError

from data_model import RenderError

from .types import InductionTask

TEMPLATE_PATH = pathlib.Path(__file__).resolve().parent / "templates" / "ilasp.las"


def load_template(template_path: pathlib.Path = TEMPLATE_PATH) -> str:
    """Wczytuje szablon z pliku (UTF-8)."""
    if not template_path.exists():
        raise FileNotFoundError(f"Brak pliku szablonu: {template_path}")
    return template_path.read_text(encoding="utf-8")


def _environment() -> Environment:
    return Environment(
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )


def render(task: InductionTask, template: str | None = None) -> str:
    """
    Renderuje zadanie wg szablonu (domyślnie TEMPLATE_PATH).

    Raises:
        RenderError przy błędzie składni szablonu lub niezdefiniowanej zmiennej.
    """
    if template is None:
        template = load_template()
    try:
        return _environment().from_string(template).render(**task.to_context())
    except TemplateError as exc:
        raise RenderError(f"Błąd szablonu: {exc}") from exc
