from __future__ import annotations

from types import ModuleType

from . import register_backend
from .base import BaseBackend, Renderer, rename_function

# Name tornado gives the generated template function.
PLACEHOLDER = "_tt_execute"


@register_backend
class TornadoBackend(BaseBackend):
    identifier = "tornado"
    runtime = None

    def server(self, module: ModuleType, source: str) -> Renderer:
        from tornado.template import Template

        template = Template(source)

        def render(data):
            return template.generate(**data).decode("utf-8")

        return render

    def client(self, module: ModuleType, source: str, name: str) -> str:
        from tornado.template import Template

        template = Template(source, name=name)
        return rename_function(template.code, PLACEHOLDER, name)
