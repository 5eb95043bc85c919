"""Kata registry: every subpackage here with a tests/ judge suite is a kata.

A kata's __init__.py declares its metadata as module constants; anything
left out falls back to the defaults in _METADATA.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# module constant -> (KataInfo field, default)
_METADATA = {
    "DESCRIPTION": ("description", ""),
    "TIMEOUT_S": ("timeout_s", 60),
    "TOTAL_TESTS": ("total_tests", 0),
    "SMELLS": ("smells", ()),
}

_KATAS_DIR = Path(__file__).parent


@dataclass
class KataInfo:
    """A kata package and where its judge suite lives."""

    name: str
    path: Path
    description: str = ""
    timeout_s: int = 60
    total_tests: int = 0
    smells: list[str] = field(default_factory=list)

    @property
    def tests_dir(self) -> Path:
        return self.path / "tests"


def _is_kata_dir(path: Path) -> bool:
    return path.name.isidentifier() and (path / "__init__.py").is_file() and (path / "tests").is_dir()


def load_kata(name: str) -> Optional[KataInfo]:
    """Look up a kata by package name (e.g. 'gilded_rose'); None if unknown."""
    kata_dir = _KATAS_DIR / name
    if not name.isidentifier() or not _is_kata_dir(kata_dir):
        return None
    try:
        mod = importlib.import_module(f"{__name__}.{name}")
    except ImportError:
        return None

    fields = {attr: getattr(mod, const, default) for const, (attr, default) in _METADATA.items()}
    fields["smells"] = list(fields["smells"])
    return KataInfo(name=getattr(mod, "NAME", name), path=kata_dir, **fields)


def list_katas() -> list[KataInfo]:
    """All loadable katas, ordered by package name."""
    found = (load_kata(d.name) for d in sorted(_KATAS_DIR.iterdir()) if _is_kata_dir(d))
    return [k for k in found if k is not None]
