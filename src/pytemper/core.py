from __future__ import annotations

import logging
import os
from pathlib import Path
from threading import RLock

from .backends import Compilation, get_backend
from .config import load_overrides
from .errors import NoBackendAvailable, UnknownExtension
from .loader import BackendLoader
from .registry import Registry, extension_of, install_hint

logger = logging.getLogger("pytemper")
if os.environ.get("TEMPER_DEBUG") and not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


class Temper:
    """Compile templates with whichever supported engine is installed.

    Each instance owns its caches: the backend chosen per extension, file
    contents read from disk and compiled results per file.  A resolved
    extension stays bound to its backend for the lifetime of the instance.
    """

    def __init__(
        self,
        *,
        registry: Registry | None = None,
        loader: BackendLoader | None = None,
    ) -> None:
        self.registry = registry if registry is not None else Registry()
        self.loader = loader if loader is not None else BackendLoader()
        self._installed: dict[str, str] = {}
        self._files: dict[Path, str] = {}
        self._compiled: dict[tuple[Path, str], Compilation] = {}
        self._lock = RLock()

    @classmethod
    def from_config(cls, path: Path | str | None = None, **kw) -> Temper:
        """Create an engine with extension overrides from a config file."""
        registry = Registry().with_overrides(load_overrides(path))
        return cls(registry=registry, **kw)

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------
    def discover(self, file: str | Path) -> str:
        """Return the backend identifier to use for *file*.

        *file* may be a path or a bare extension such as ``".mustache"``.
        """
        ext = extension_of(file)
        with self._lock:
            if ext in self._installed:
                return self._installed[ext]

            candidates = self.registry.lookup(ext)
            if candidates is None:
                raise UnknownExtension(ext)

            for engine in candidates:
                if self.loader.try_load(engine) is None:
                    continue
                self._installed[ext] = engine
                logger.debug("using %s for %s templates", engine, ext)
                return engine

        raise NoBackendAvailable(ext, candidates, [install_hint(c) for c in candidates])

    @property
    def installed(self) -> dict[str, str]:
        """Snapshot of extension -> backend resolutions made so far."""
        with self._lock:
            return dict(self._installed)

    # ------------------------------------------------------------------
    # Compilation
    # ------------------------------------------------------------------
    def compile(self, template: str, engine: str, name: str) -> Compilation | None:
        """Compile *template* with *engine* into library, client and server parts.

        *name* identifies the template in generated client code.  Errors raised
        by the engine's own compiler propagate unchanged.
        """
        backend = get_backend(engine)
        if backend is None:
            logger.warning("no compiler for template engine %s", engine)
            return None

        module = self.loader.load(engine)
        server = backend.server(module, template)
        client = backend.client(module, template, name)

        library = ""
        if backend.runtime is not None:
            library = self.read(self.loader.location(engine) / backend.runtime)

        return Compilation(library=library, client=client, server=server)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------
    def read(self, file: str | Path) -> str:
        """Return the UTF-8 contents of *file*, cached per path."""
        path = Path(file).resolve()
        with self._lock:
            if path not in self._files:
                self._files[path] = path.read_text(encoding="utf-8")
            return self._files[path]

    def fetch(self, file: str | Path, engine: str | None = None) -> Compilation | None:
        """Read, discover and compile *file*.

        The result is cached per path and engine, so passing an explicit
        *engine* for an already fetched file compiles it again with that engine.
        """
        path = Path(file).resolve()
        with self._lock:
            engine = engine or self.discover(path)
            key = (path, engine)
            if key in self._compiled:
                return self._compiled[key]
            compiled = self.compile(self.read(path), engine, path.stem)
            if compiled is not None:
                self._compiled[key] = compiled
            return compiled


__all__ = ["Temper"]
