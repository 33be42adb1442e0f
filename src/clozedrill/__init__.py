"""clozedrill package: cloze flashcard decks and drill sessions."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]


def _version_from_pyproject() -> str | None:
    """Read [project].version from a nearby pyproject.toml when running from source."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.exists():
            continue
        try:
            data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError:
            return None
        project = data.get("project", {})
        if project.get("name") != "clozedrill":
            continue
        value = project.get("version")
        return str(value) if value else None
    return None


def _resolve_version() -> str:
    source_version = _version_from_pyproject()
    if source_version is not None:
        return source_version
    try:
        return version("clozedrill")
    except PackageNotFoundError:
        return "0+unknown"


__version__ = _resolve_version()
