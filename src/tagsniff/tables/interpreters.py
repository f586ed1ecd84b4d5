"""Interpreter table used for shebang and interpreter lookups."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Set

from tagsniff.tags import TagSet

_INTERPRETERS: Dict[str, Set[str]] = {
    "ash": {"shell", "ash"},
    "awk": {"awk"},
    "bash": {"shell", "bash"},
    "bats": {"shell", "bash", "bats"},
    "cbsd": {"shell", "cbsd"},
    "csh": {"shell", "csh"},
    "dash": {"shell", "dash"},
    "expect": {"expect"},
    "fish": {"fish"},
    "ksh": {"shell", "ksh"},
    "node": {"javascript"},
    "nodejs": {"javascript"},
    "perl": {"perl"},
    "php": {"php"},
    "php7": {"php", "php7"},
    "php8": {"php", "php8"},
    "python": {"python"},
    "python2": {"python", "python2"},
    "python3": {"python", "python3"},
    "ruby": {"ruby"},
    "sh": {"shell", "sh"},
    "tcsh": {"shell", "tcsh"},
    "zsh": {"shell", "zsh"},
}

INTERPRETERS: Mapping[str, TagSet] = MappingProxyType(
    {name: frozenset(tags) for name, tags in _INTERPRETERS.items()}
)

__all__ = ["INTERPRETERS"]
