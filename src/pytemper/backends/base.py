from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import ModuleType
from typing import Any

Renderer = Callable[[Mapping[str, Any]], str]

_NON_WORD = re.compile(r"\W")


def python_name(name: str) -> str:
    """Coerce *name* into a valid Python identifier."""
    ident = _NON_WORD.sub("_", name)
    if not ident or ident[0].isdigit():
        ident = "_" + ident
    return ident


def rename_function(code: str, placeholder: str, name: str) -> str:
    """Replace the first ``def <placeholder>`` in *code* with ``def <name>``."""
    return code.replace(f"def {placeholder}", f"def {python_name(name)}", 1)


@dataclass(frozen=True)
class Compilation:
    """Uniform output of every backend."""

    library: str
    client: str
    server: Renderer


class BaseBackend(ABC):
    """Normalise one template library's compile API."""

    identifier: str = ""
    # Runtime file shipped with the backend, relative to its install directory.
    runtime: str | None = None

    @abstractmethod
    def server(self, module: ModuleType, source: str) -> Renderer:
        """Return a callable rendering *source* against a data mapping."""

    @abstractmethod
    def client(self, module: ModuleType, source: str, name: str) -> str:
        """Return precompiled code for *source* identified by *name*."""
