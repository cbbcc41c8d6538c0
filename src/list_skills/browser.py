"""Textual browser for a skills listing."""
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.theme import Theme
from textual.widgets import Header, Footer, Static

from list_skills.registry import SkillRecord
from list_skills.widgets.skill_list import SkillListWidget


MONO_THEME = Theme(
    name="mono",
    primary="#e0e0e0",
    secondary="#444444",
    accent="#e0e0e0",
    foreground="#e0e0e0",
    background="#000000",
    dark=True,
    variables={"border": "#444444", "scrollbar": "#444444"},
)

AMBER_THEME = Theme(
    name="amber",
    primary="#ffb000",
    secondary="#000000",
    accent="#ffb000",
    foreground="#ffb000",
    background="#000000",
    dark=True,
    variables={
        "footer-foreground": "#8a5f00",
        "footer-key-foreground": "#ffb000",
        "border": "#3d2a00",
        "scrollbar": "#3d2a00",
    },
)


class SkillBrowser(App):
    """Scrollable view of a sorted skills listing."""

    TITLE = "SKILLS"
    CSS = """
    Screen { background: #000000; }
    * { background: transparent; }
    #skills-panel { height: auto; border: tall $border; }
    .panel-title { text-style: bold; padding: 0 1; }
    Header { background: #000000; color: $foreground; }
    Footer { background: #000000; }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("t", "toggle_theme", "Theme"),
    ]

    def __init__(self, records: list[SkillRecord], root: str = ""):
        super().__init__()
        self.records = records
        self.sub_title = root
        self._current_theme = "mono"

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="main"):
            with Vertical(id="skills-panel"):
                yield Static(f"SKILLS ({len(self.records)})", classes="panel-title")
                yield SkillListWidget(id="skill-list")
        yield Footer()

    def on_mount(self):
        self.register_theme(MONO_THEME)
        self.register_theme(AMBER_THEME)
        self.theme = "mono"
        self.query_one("#skill-list", SkillListWidget).update_skills(self.records)

    def action_toggle_theme(self):
        if self._current_theme == "mono":
            self.theme = "amber"
            self._current_theme = "amber"
        else:
            self.theme = "mono"
            self._current_theme = "mono"
