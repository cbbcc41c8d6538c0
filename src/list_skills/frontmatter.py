"""Minimal front-matter parser for SKILL.md files.

Only a small line-oriented subset is understood: ``key: value`` scalars,
quoted strings and flat ``[a, b, c]`` arrays. Anything else is ignored
rather than reported.
"""

SENTINEL = "---"
QUOTES = ('"', "'")


def strip_quotes(value: str) -> str:
    """Remove one layer of matching single or double quotes."""
    if len(value) >= 2 and value[0] in QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def _parse_value(raw: str) -> str | list[str]:
    value = strip_quotes(raw.strip())
    if value.startswith("[") and value.endswith("]"):
        return [strip_quotes(item.strip()) for item in value[1:-1].split(",")]
    return value


def parse_frontmatter(text: str) -> dict[str, str | list[str]]:
    """Parse the ``---`` delimited block at the head of ``text``.

    Returns an empty dict when the first line is not a sentinel or the block
    is never closed. Repeated keys keep the last value.
    """
    lines = text.split("\n")
    if lines[0].strip() != SENTINEL:
        return {}

    end = next((i for i in range(1, len(lines)) if lines[i].strip() == SENTINEL), None)
    if end is None:
        return {}

    metadata: dict[str, str | list[str]] = {}
    for line in lines[1:end]:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, raw = line.partition(":")
        if not sep:
            continue
        metadata[key.strip()] = _parse_value(raw)
    return metadata
