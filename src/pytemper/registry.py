"""Static mapping of file extensions to candidate template backends."""
from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

# Order encodes preference: the first importable candidate wins.
SUPPORTED: Mapping[str, tuple[str, ...]] = MappingProxyType({
    ".jinja": ("jinja2",),
    ".jinja2": ("jinja2",),
    ".j2": ("jinja2",),
    ".mustache": ("chevron", "pybars"),
    ".hbs": ("pybars",),
    ".handlebars": ("pybars",),
    ".mako": ("mako",),
    ".tornado": ("tornado",),
})

# Backend identifier -> distribution name on the package index.
DISTRIBUTIONS: Mapping[str, str] = MappingProxyType({
    "jinja2": "Jinja2",
    "chevron": "chevron",
    "pybars": "pybars3",
    "mako": "Mako",
    "tornado": "tornado",
})


def install_hint(identifier: str) -> str:
    return f"pip install {DISTRIBUTIONS.get(identifier, identifier)}"


def extension_of(path: str | Path) -> str:
    """Return the lower-cased extension of *path*, leading dot included.

    A bare extension such as ``".ejs"`` is returned as is (lower-cased)
    rather than being treated as a dot file without suffix.
    """
    name = Path(path).name
    if name.startswith(".") and name.count(".") == 1:
        return name.lower()
    return Path(name).suffix.lower()


class Registry:
    """Read-only lookup of extension -> candidate backend identifiers."""

    def __init__(self, table: Mapping[str, Sequence[str]] | None = None) -> None:
        source = SUPPORTED if table is None else table
        self._table = MappingProxyType(
            {extension_of(ext): tuple(cands) for ext, cands in source.items()}
        )

    def lookup(self, extension: str) -> tuple[str, ...] | None:
        return self._table.get(extension_of(extension))

    def extensions(self) -> tuple[str, ...]:
        return tuple(self._table)

    def with_overrides(self, overrides: Mapping[str, Sequence[str]]) -> Registry:
        """Return a new registry with *overrides* layered over this table."""
        table = dict(self._table)
        for ext, cands in overrides.items():
            table[extension_of(ext)] = tuple(cands)
        return Registry(table)

    def __contains__(self, extension: object) -> bool:
        return isinstance(extension, str) and extension_of(extension) in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Registry({dict(self._table)!r})"


__all__ = [
    "DISTRIBUTIONS",
    "Registry",
    "SUPPORTED",
    "extension_of",
    "install_hint",
]
