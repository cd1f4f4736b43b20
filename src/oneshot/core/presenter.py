from collections.abc import Mapping
from typing import Any

from rich.console import Console

from oneshot.core.models import ViewProtocol
from oneshot.core.style import OutputStyle, colorize

console_out = Console()
console_err = Console(stderr=True)

UNKNOWN = "<unknown>"
FIRST_PAGE_NOTICE = "(More results are available; only the first page is shown.)"


def field_or_unknown(data: Any, *path: str) -> Any:
    """
    Walks ``path`` through nested mappings, returning UNKNOWN at the first
    missing or null step.
    """
    current = data
    for key in path:
        if not isinstance(current, Mapping):
            return UNKNOWN
        current = current.get(key)
        if current is None:
            return UNKNOWN
    return current


class GenericView:
    """Fallback view: one ``key: value`` line per top-level response field."""

    @classmethod
    def format_lines(cls, payload: Any) -> list[str]:
        if not isinstance(payload, Mapping):
            return []
        return [
            f"{key}: {value}"
            for key, value in payload.items()
            if key != "ResponseMetadata"
        ]


def render(payload: Any, view_class: type[ViewProtocol] | None = None) -> list[str]:
    view_class = view_class or GenericView
    return list(view_class.format_lines(payload))


class CommandPresenter:
    def __init__(self, lines: list[str]):
        self.lines = lines

    def print_lines(self):
        for line in self.lines:
            console_out.print(line, markup=False, highlight=False, soft_wrap=True)


def print_verbose_header(details: list[tuple[str, str]]):
    width = max((len(label) for label, _ in details), default=0) + 1
    for label, value in details:
        console_err.print(
            colorize(f"{label + ':':<{width}}", OutputStyle.LABEL),
            colorize(value, OutputStyle.DETAIL),
        )
    console_err.print("")


def print_failure(message: str):
    prefix, _, detail = message.partition("\n")
    console_err.print(colorize(prefix, OutputStyle.ERROR), soft_wrap=True)
    if detail:
        console_err.print(detail, markup=False, highlight=False, soft_wrap=True)
