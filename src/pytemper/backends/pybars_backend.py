from __future__ import annotations

from types import ModuleType

from . import register_backend
from .base import BaseBackend, Renderer


@register_backend
class PybarsBackend(BaseBackend):
    """Handlebars templates through pybars3."""

    identifier = "pybars"
    runtime = "_compiler.py"

    def server(self, module: ModuleType, source: str) -> Renderer:
        template = module.Compiler().compile(source)

        # pybars returns a ``strlist``; join it into a plain string.
        def render(data):
            return str(template(data))

        return render

    def client(self, module: ModuleType, source: str, name: str) -> str:
        return module.Compiler().precompile(source)
