"""Sorting and serialization of collected skill records."""
import json
import locale

import yaml


def _collation_key(name: str) -> tuple[str, str, str]:
    # strxfrm rejects NUL; swapcase puts lowercase first on case-only ties
    return (locale.strxfrm(name.casefold().replace("\0", "")), name.swapcase(), name)


def sort_skills(records: list) -> list:
    """Sort records by name using the current collation locale.

    The sort is stable: records with equal names keep their collection order.
    """
    return sorted(records, key=lambda record: _collation_key(record.name))


def render_json(records: list) -> str:
    return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False) + "\n"


def render_yaml(records: list) -> str:
    return yaml.safe_dump(
        [r.to_dict() for r in records],
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


FORMATS = {
    "json": render_json,
    "yaml": render_yaml,
}


def render(records: list, fmt: str = "json") -> str:
    """Render already-sorted records in the named output format."""
    try:
        renderer = FORMATS[fmt]
    except KeyError:
        raise ValueError(f"Unknown output format: {fmt}") from None
    return renderer(records)
