import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

console = Console(stderr=True)


def configure_logging(level, console=console):
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(markup=True, show_time=False, console=console)],
        force=True)


def report_error(exc, console=console):
    text = getattr(exc, "text", None)
    column = getattr(exc, "column", None)

    lines = [f"[bold red]{escape(str(exc))}[/bold red]"]
    if text is not None:
        prefix = "input: "
        lines.append("")
        lines.append(prefix + escape(text))
        if column is not None:
            lines.append(" " * (len(prefix) + column) + "^")

    console.print(Panel("\n".join(lines), expand=False, border_style="red"))

    logging.error(str(exc))
