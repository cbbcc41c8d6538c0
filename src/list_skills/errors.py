"""Error kinds raised while scanning a skills directory."""
from pathlib import Path


class SkillScanError(Exception):
    """Base error for skill discovery."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{message}: {path}")
        self.path = path


class CandidateReadError(SkillScanError):
    """A SKILL.md candidate could not be read. The file is skipped."""

    def __init__(self, path: Path):
        super().__init__(path, "cannot read skill file")


class DirectoryListError(SkillScanError):
    """A directory could not be listed. Aborts the whole scan."""

    def __init__(self, path: Path):
        super().__init__(path, "cannot list directory")
