from oneshot.core.style import OutputStyle, colorize


def test_colorize_wraps_text():
    assert colorize("done", OutputStyle.LABEL) == "[cyan]done[/cyan]"


def test_colorize_escapes_markup_in_text():
    assert colorize("[b]", OutputStyle.ERROR) == r"[red]\[b][/red]"
