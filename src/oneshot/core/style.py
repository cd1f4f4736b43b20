from enum import StrEnum

from rich.markup import escape


class OutputStyle(StrEnum):
    """
    Rich color names used for console diagnostics.
    """

    ERROR = "red"
    LABEL = "cyan"
    DETAIL = "dim white"


def colorize(text: str, style: OutputStyle) -> str:
    """
    Wraps text in Rich-compatible color tags.

    Args:
        text: The string to be colored. Markup inside it is escaped so that
            identifiers such as list reprs are printed literally.
        style: The OutputStyle enum value (e.g., OutputStyle.ERROR).

    Returns:
        String formatted as '[color]text[/color]'
    """
    return f"[{style}]{escape(text)}[/{style}]"
