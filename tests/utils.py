from __future__ import annotations

import types


class CountingImporter:
    """Importer stand-in that only knows about *available* modules."""

    def __init__(self, *available: str, broken: tuple[str, ...] = ()) -> None:
        self.modules = {name: types.ModuleType(name) for name in available}
        self.broken = set(broken)
        self.calls: list[str] = []

    def __call__(self, name: str) -> types.ModuleType:
        self.calls.append(name)
        if name in self.broken:
            raise RuntimeError("broken install")
        if name not in self.modules:
            raise ModuleNotFoundError(f"No module named {name!r}")
        return self.modules[name]

    def install(self, name: str) -> None:
        self.modules[name] = types.ModuleType(name)
