"""Console styling for the Taskbot read loop."""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

from . import __version__

CITY_LIGHTS_COLORS = {
    'surface_light': '#41505E',
    'primary': '#68D5F3',
    'accent': '#B7C5D3',
    'success': '#8BD649',
    'warning': '#FFD93D',
    'error': '#F78C6C',
    'text_muted': '#4F5B66',
    'text_bright': '#FFFFFF',
}

TASKBOT_THEME = Theme({
    'muted': f"{CITY_LIGHTS_COLORS['text_muted']}",
    'bright': f"{CITY_LIGHTS_COLORS['text_bright']} bold",
    'success': f"{CITY_LIGHTS_COLORS['success']}",
    'warning': f"{CITY_LIGHTS_COLORS['warning']} bold",
    'error': f"{CITY_LIGHTS_COLORS['error']} bold",
    'primary': f"{CITY_LIGHTS_COLORS['primary']} bold",
    'accent': f"{CITY_LIGHTS_COLORS['accent']}",
    'header': f"{CITY_LIGHTS_COLORS['text_bright']} bold",
    'border': f"{CITY_LIGHTS_COLORS['surface_light']}",
})

QUICK_HELP = [
    ("todo <name>", "add a to-do"),
    ("deadline <name> /by <yyyy/mm/dd>", "add a deadline"),
    ("event <name> /from <yyyy/mm/dd> /to <yyyy/mm/dd>", "add an event"),
    ("list", "show all tasks"),
    ("mark | unmark | delete <number>", "update a task"),
    ("find <word>", "search task names"),
    ("bye", "save and quit"),
]


def get_themed_console(no_color: bool = False) -> Console:
    """Get a console with the Taskbot theme applied."""
    return Console(theme=TASKBOT_THEME, no_color=no_color, highlight=False)


def show_startup_banner(console: Console) -> None:
    """Display the startup banner with the command summary."""
    lines = Text()
    for index, (usage, meaning) in enumerate(QUICK_HELP):
        if index:
            lines.append("\n")
        lines.append(f"{usage:<50}", style="primary")
        lines.append(meaning, style="muted")

    console.print(Panel(
        lines,
        title="[bright]Taskbot[/bright]",
        subtitle=f"[muted]v{__version__}[/muted]",
        border_style="border",
        padding=(1, 2),
    ))


def style_for_result(ok: bool, is_exit: bool = False) -> str:
    """Pick the style used to print a command result."""
    if not ok:
        return "error"
    return "accent" if is_exit else "success"
