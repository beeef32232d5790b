from __future__ import annotations

from types import ModuleType

from . import register_backend
from .base import BaseBackend, Renderer

_CLIENT = '''\
from jinja2 import Environment, Template

_environment = Environment()
_template = Template.from_code(
    _environment,
    compile({code!r}, {name!r}, "exec"),
    _environment.make_globals(None),
)


def render(data):
    return _template.render(data)
'''


@register_backend
class JinjaBackend(BaseBackend):
    """Jinja2 templates.

    The compiled :class:`jinja2.Template` is wrapped in a closure so the
    server side exposes a plain ``render(data)`` function.  The client side
    is the raw generated module source, rebuilt into a template object when
    the shipped code is executed.
    """

    identifier = "jinja2"
    runtime = "runtime.py"

    def server(self, module: ModuleType, source: str) -> Renderer:
        template = module.Environment().from_string(source)

        def render(data):
            return template.render(data)

        return render

    def client(self, module: ModuleType, source: str, name: str) -> str:
        code = module.Environment().compile(source, name=name, raw=True)
        return _CLIENT.format(code=code, name=name)
