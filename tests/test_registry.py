import pytest

from pytemper.backends import registered
from pytemper.registry import SUPPORTED, Registry, extension_of, install_hint


@pytest.mark.parametrize(
    "value,expected",
    [
        ("views/greet.j2", ".j2"),
        ("GREET.Mustache", ".mustache"),
        (".hbs", ".hbs"),
        (".MAKO", ".mako"),
        ("archive.tar.jinja", ".jinja"),
        ("Makefile", ""),
        ("", ""),
    ],
)
def test_extension_of(value, expected):
    assert extension_of(value) == expected


def test_lookup_preserves_candidate_order():
    reg = Registry()
    assert reg.lookup(".mustache") == ("chevron", "pybars")
    assert reg.lookup("page.J2") == ("jinja2",)


def test_lookup_unknown_extension_is_absent():
    reg = Registry()
    assert reg.lookup(".ejs") is None
    assert ".ejs" not in reg
    assert ".mako" in reg


def test_with_overrides_returns_new_registry():
    base = Registry()
    custom = base.with_overrides({".TPL": ["jinja2"], ".mustache": ["pybars"]})
    assert custom.lookup(".tpl") == ("jinja2",)
    assert custom.lookup(".mustache") == ("pybars",)
    assert base.lookup(".mustache") == ("chevron", "pybars")
    assert base.lookup(".tpl") is None


def test_every_candidate_has_a_compiler():
    known = set(registered())
    for ext, candidates in SUPPORTED.items():
        for ident in candidates:
            assert ident in known, f"{ext}: {ident} has no compiler"


def test_install_hint_uses_distribution_name():
    assert install_hint("pybars") == "pip install pybars3"
    assert install_hint("jinja2") == "pip install Jinja2"
    assert install_hint("unknown") == "pip install unknown"
