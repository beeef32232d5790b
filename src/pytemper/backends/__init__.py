"""Backend normaliser registry."""
from __future__ import annotations

from .base import BaseBackend, Compilation

_REGISTRY: dict[str, BaseBackend] = {}


def register_backend(backend: type[BaseBackend]) -> type[BaseBackend]:
    """Register a backend class and return it for decorator use."""
    _REGISTRY[backend.identifier] = backend()
    return backend


def get_backend(identifier: str) -> BaseBackend | None:
    return _REGISTRY.get(identifier)


def registered() -> tuple[str, ...]:
    return tuple(_REGISTRY)


# register default backends
from . import (  # noqa: F401,E402
    chevron_backend,
    jinja_backend,
    mako_backend,
    pybars_backend,
    tornado_backend,
)

__all__ = [
    "BaseBackend",
    "Compilation",
    "get_backend",
    "register_backend",
    "registered",
]
