"""Skill registry: finds SKILL.md files under a directory tree and reads their frontmatter."""
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from list_skills.errors import CandidateReadError, DirectoryListError
from list_skills.frontmatter import parse_frontmatter
from list_skills.report import sort_skills

log = logging.getLogger(__name__)

DESCRIPTOR_NAME = "SKILL.md"


@dataclass
class SkillRecord:
    name: str
    description: str
    path: str
    allowed_tools: str | list[str] | None = None

    def to_dict(self) -> dict:
        item = {"name": self.name, "description": self.description, "path": self.path}
        if self.allowed_tools is not None:
            item["allowed-tools"] = self.allowed_tools
        return item


def walk_descriptors(
    root: Path,
    descriptor: str = DESCRIPTOR_NAME,
    follow_symlinks: bool = True,
) -> Iterator[Path]:
    """Yield every file named ``descriptor`` below ``root``, at any depth.

    A directory whose resolved path is already on the current descent is
    not entered again, so symlink loops end. Aliases elsewhere are walked.
    Raises DirectoryListError if any directory cannot be listed.
    """
    ancestors: set[Path] = set()

    def walk(directory: Path) -> Iterator[Path]:
        real = directory.resolve()
        if real in ancestors:
            log.debug("Symlink loop at %s, skipping", directory)
            return
        try:
            entries = list(directory.iterdir())
        except OSError as exc:
            raise DirectoryListError(directory) from exc
        ancestors.add(real)
        try:
            for entry in entries:
                if entry.is_dir() and (follow_symlinks or not entry.is_symlink()):
                    yield from walk(entry)
                elif entry.name == descriptor:
                    yield entry
        finally:
            ancestors.discard(real)

    yield from walk(Path(root))


def read_candidate(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CandidateReadError(path) from exc


def collect_skill(path: Path) -> SkillRecord | None:
    """Build a SkillRecord from one descriptor file.

    Returns None when ``name`` or ``description`` is missing or is not a plain
    string. Read failures raise CandidateReadError.
    """
    meta = parse_frontmatter(read_candidate(path))
    name = meta.get("name")
    description = meta.get("description")
    if not isinstance(name, str) or not isinstance(description, str):
        return None
    record = SkillRecord(name=name, description=description, path=str(path))
    if meta.get("allowed-tools"):
        record.allowed_tools = meta["allowed-tools"]
    return record


class SkillRegistry:
    """Collects skill records from every SKILL.md under a root directory."""

    def __init__(
        self,
        skills_dir: Path,
        descriptor: str = DESCRIPTOR_NAME,
        follow_symlinks: bool = True,
    ):
        self.skills: list[SkillRecord] = []
        self._load(Path(skills_dir), descriptor, follow_symlinks)

    def _load(self, skills_dir: Path, descriptor: str, follow_symlinks: bool):
        for skill_file in walk_descriptors(skills_dir, descriptor, follow_symlinks):
            try:
                record = collect_skill(skill_file)
            except CandidateReadError:
                log.debug("Skipping unreadable %s", skill_file, exc_info=True)
                continue
            if record is not None:
                self.skills.append(record)
        log.debug("Collected %d skills from %s", len(self.skills), skills_dir)

    def sorted_skills(self) -> list[SkillRecord]:
        return sort_skills(self.skills)
