"""Entry point for list-skills."""
import argparse
import locale
import logging
import os
import sys
from pathlib import Path

from list_skills.config import default_config_path, load_config, resolve_root
from list_skills.errors import DirectoryListError
from list_skills.registry import SkillRegistry
from list_skills.report import FORMATS, render

log = logging.getLogger(__name__)

USAGE = "Usage: list-skills <skills-directory>"


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="list-skills",
        description="List SKILL.md skill descriptors found under a directory",
    )
    parser.add_argument("skills_dir", nargs="?", help="Directory to scan recursively")
    parser.add_argument("--format", choices=sorted(FORMATS), default=None, help="Output format (default: json)")
    parser.add_argument("--config", type=Path, default=None, help="Config file (default: ~/.config/list-skills/config.toml)")
    parser.add_argument("--browse", action="store_true", help="Open the listing in an interactive browser")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log scan details to stderr")
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.skills_dir is None:
        print(USAGE, file=sys.stderr)
        return 1

    home = os.environ.get("HOME")
    config_path = args.config or default_config_path(home)
    try:
        config = load_config(config_path)
    except (OSError, ValueError) as exc:
        print(f"invalid config: {config_path}: {exc}", file=sys.stderr)
        return 1
    fmt = args.format or config["format"]
    if fmt not in FORMATS:
        print(f"unknown output format: {fmt}", file=sys.stderr)
        return 1
    root = resolve_root(args.skills_dir, home)
    if not root.exists():
        print(f"missing skills dir: {root}", file=sys.stderr)
        return 1

    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        log.debug("Locale from environment unsupported, collating with the C locale")

    try:
        registry = SkillRegistry(
            root,
            descriptor=config["descriptor"],
            follow_symlinks=config["follow_symlinks"],
        )
    except DirectoryListError as exc:
        log.debug("Scan aborted", exc_info=True)
        print(exc, file=sys.stderr)
        return 1
    skills = registry.sorted_skills()

    if args.browse:
        from list_skills.browser import SkillBrowser

        SkillBrowser(skills, root=str(root)).run()
        return 0

    sys.stdout.write(render(skills, fmt))
    return 0


if __name__ == "__main__":
    sys.exit(main())
