"""Skill list widget showing every discovered skill with its details."""
from rich.text import Text
from textual.widgets import Static
from textual.reactive import reactive

from list_skills.registry import SkillRecord


def format_tools(allowed_tools: str | list[str] | None) -> str:
    if allowed_tools is None:
        return ""
    if isinstance(allowed_tools, list):
        return ", ".join(allowed_tools)
    return allowed_tools


class SkillListWidget(Static):
    """Displays skills as name, description, tools and source path."""
    skill_count: reactive[int] = reactive(0)

    def format_skill(self, record: SkillRecord) -> str:
        """Format a single skill as plain text (for testing)."""
        lines = [f"  {record.name}", f"    {record.description}"]
        tools = format_tools(record.allowed_tools)
        if tools:
            lines.append(f"    tools: {tools}")
        lines.append(f"    {record.path}")
        return "\n".join(lines)

    def update_skills(self, records: list[SkillRecord]) -> None:
        self.skill_count = len(records)
        if not records:
            self.update(Text("  No skills found", style="dim"))
            return

        text = Text()
        for i, record in enumerate(records):
            if i > 0:
                text.append("\n\n")
            text.append(f"  {record.name}\n", style="bold")
            text.append(f"    {record.description}", style="dim")
            tools = format_tools(record.allowed_tools)
            if tools:
                text.append(f"\n    tools: {tools}")
            text.append(f"\n    {record.path}", style="italic dim")
        self.update(text)
