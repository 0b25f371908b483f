"""
Project files — loads a small code project into memory and applies
suggestions to individual files without touching the disk.
"""

from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass, field
from typing import Iterable

from .editing.diff_parser import Suggestion
from .editing.patch_applier import ApplyResult, PatchApplier
from .language import detect_file_language

logger = logging.getLogger(__name__)

SKIP_DIRS = {
    ".git", "node_modules", "__pycache__", "venv", ".venv", "env",
    "dist", "build", ".tox", ".mypy_cache", ".pytest_cache",
    "target", "bin", "obj", ".idea", ".vscode", ".eggs",
    "site-packages", ".next", "coverage", "htmlcov", ".code_evolve",
}

SKIP_EXTENSIONS = {
    ".pyc", ".pyo", ".exe", ".dll", ".so", ".dylib", ".o", ".obj",
    ".class", ".jar", ".zip", ".tar", ".gz", ".bz2",
    ".png", ".jpg", ".jpeg", ".gif", ".ico", ".svg", ".bmp",
    ".mp3", ".mp4", ".wav", ".pdf", ".woff", ".woff2", ".ttf",
    ".lock", ".db", ".sqlite", ".sqlite3",
}

_MAX_PROJECT_FILES = 50


class ProjectError(Exception):
    """Raised for unreadable project paths or unknown file names."""


@dataclass
class ProjectFile:
    """A single file held in memory, with its content as first loaded."""
    name: str
    language: str
    content: str
    original_content: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    is_modified: bool = False

    @classmethod
    def create(cls, name: str, content: str,
               language: str | None = None) -> "ProjectFile":
        clean = content.lstrip()
        return cls(
            name=name,
            language=language or detect_file_language(name),
            content=clean,
            original_content=clean,
        )


class Project:
    """An ordered collection of in-memory project files."""

    def __init__(self, files: Iterable[ProjectFile] = ()) -> None:
        self.files: list[ProjectFile] = list(files)

    def __len__(self) -> int:
        return len(self.files)

    @property
    def names(self) -> list[str]:
        return [f.name for f in self.files]

    def get(self, name: str) -> ProjectFile:
        for f in self.files:
            if f.name == name:
                return f
        raise ProjectError(f"No file named {name!r} in project")

    def apply_suggestions(
        self,
        name: str,
        suggestions: Iterable[Suggestion],
        applier: PatchApplier | None = None,
    ) -> ApplyResult:
        """Patch the named file's current content and update its state."""
        target = self.get(name)
        result = (applier or PatchApplier()).apply(target.content, suggestions)
        target.content = result.content
        target.is_modified = target.content != target.original_content
        logger.info(
            "[Project] %s: %d applied, %d skipped",
            name, result.applied, result.skipped,
        )
        return result

    def reset(self, name: str) -> None:
        target = self.get(name)
        target.content = target.original_content
        target.is_modified = False

    def modified_files(self) -> list[ProjectFile]:
        return [f for f in self.files if f.is_modified]


def load_project(directory: str = ".", max_file_size: int = 32_000) -> Project:
    """Read text files under *directory* into a :class:`Project`.

    VCS, cache and build directories are skipped, as are binary extensions,
    empty files and files larger than *max_file_size* bytes. File names are
    stored relative to *directory* with forward slashes.
    """
    abs_dir = os.path.abspath(directory)
    if not os.path.isdir(abs_dir):
        raise ProjectError(f"Not a directory: {directory}")

    files: list[ProjectFile] = []
    for root, dirs, names in os.walk(abs_dir):
        # Filter out skipped directories (in-place so os.walk respects it)
        dirs[:] = sorted(d for d in dirs if d not in SKIP_DIRS)

        for fname in sorted(names):
            _, ext = os.path.splitext(fname)
            if ext.lower() in SKIP_EXTENSIONS:
                continue

            fpath = os.path.join(root, fname)
            try:
                size = os.path.getsize(fpath)
            except OSError:
                continue
            if size > max_file_size or size == 0:
                logger.debug("[Project] Skipping %s (%d bytes)", fpath, size)
                continue

            try:
                with open(fpath, "r", encoding="utf-8", errors="replace") as f:
                    content = f.read()
            except OSError as exc:
                logger.warning("[Project] Could not read %s: %s", fpath, exc)
                continue

            rel_path = os.path.relpath(fpath, abs_dir).replace("\\", "/")
            files.append(ProjectFile(
                name=rel_path,
                language=detect_file_language(fname),
                content=content,
                original_content=content,
            ))

            if len(files) >= _MAX_PROJECT_FILES:
                logger.warning(
                    "[Project] File limit (%d) reached, ignoring the rest",
                    _MAX_PROJECT_FILES,
                )
                return Project(sorted(files, key=lambda f: f.name))

    return Project(sorted(files, key=lambda f: f.name))
