from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from importlib import resources as ilr
from pathlib import Path
from threading import RLock
from types import ModuleType

from .errors import BackendNotInstalled
from .registry import install_hint

logger = logging.getLogger("pytemper.loader")


class BackendLoader:
    """Import template backends on demand and remember the ones that worked.

    Only successful imports are cached.  A backend that failed to import is
    retried on the next request so that installing it while the process is
    running is picked up without a restart.
    """

    def __init__(self, importer: Callable[[str], ModuleType] = importlib.import_module) -> None:
        self._importer = importer
        self._required: dict[str, ModuleType] = {}
        self._lock = RLock()

    @property
    def loaded(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._required)

    def try_load(self, identifier: str) -> ModuleType | None:
        """Return the backend module or ``None`` if it is not installed."""
        with self._lock:
            module = self._required.get(identifier)
            if module is not None:
                return module
            importlib.invalidate_caches()
            try:
                module = self._importer(identifier)
            except Exception as exc:  # missing or broken install
                logger.debug("backend %s unavailable: %s", identifier, exc)
                return None
            self._required[identifier] = module
            logger.debug("loaded backend %s", identifier)
            return module

    def load(self, identifier: str) -> ModuleType:
        module = self.try_load(identifier)
        if module is None:
            raise BackendNotInstalled(identifier, install_hint(identifier))
        return module

    def location(self, identifier: str) -> Path:
        """Return the installation directory of a backend."""
        module = self.load(identifier)
        file_attr = getattr(module, "__file__", None)
        if file_attr is not None:
            return Path(file_attr).resolve().parent
        return Path(str(ilr.files(module.__name__))).resolve()  # pragma: no cover - namespace package


__all__ = ["BackendLoader"]
