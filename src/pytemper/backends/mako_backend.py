from __future__ import annotations

from types import ModuleType

from . import register_backend
from .base import BaseBackend, Renderer, python_name, rename_function

# Name mako gives the generated top level render function.
PLACEHOLDER = "render_body"


@register_backend
class MakoBackend(BaseBackend):
    identifier = "mako"
    runtime = "runtime.py"

    def server(self, module: ModuleType, source: str) -> Renderer:
        from mako.template import Template

        template = Template(source)

        def render(data):
            return template.render(**data)

        return render

    def client(self, module: ModuleType, source: str, name: str) -> str:
        from mako.template import Template

        template = Template(source, uri=python_name(name))
        return rename_function(template.code, PLACEHOLDER, name)
