from __future__ import annotations

from types import ModuleType

from . import register_backend
from .base import BaseBackend, Renderer

_CLIENT = '''\
import chevron

_tokens = {tokens!r}


def render(data):
    return chevron.render(_tokens, data)
'''


def _tokenize(source: str) -> list[tuple[str, str]]:
    from chevron.tokenizer import tokenize

    # tokenize() is lazy; materialise it so syntax errors surface here.
    return list(tokenize(source))


@register_backend
class ChevronBackend(BaseBackend):
    """Mustache templates through chevron.

    chevron has no code generator, but :func:`chevron.render` accepts a
    pre-tokenised template.  The token list plays the role of the compiled
    template on both sides.
    """

    identifier = "chevron"
    runtime = "renderer.py"

    def server(self, module: ModuleType, source: str) -> Renderer:
        tokens = _tokenize(source)

        def render(data):
            return module.render(tokens, data)

        return render

    def client(self, module: ModuleType, source: str, name: str) -> str:
        return _CLIENT.format(tokens=_tokenize(source))
