from __future__ import annotations

from pathlib import Path

import pytest

from pytemper import Temper, TemperConfigError
from pytemper.config import load_overrides
from pytemper.loader import BackendLoader
from pytemper.paths import config_file

from tests.utils import CountingImporter


def test_missing_file_means_no_overrides(tmp_path: Path):
    assert load_overrides(tmp_path / "absent.ini") == {}


def test_ini_overrides(tmp_path: Path):
    path = tmp_path / "temper.ini"
    path.write_text("[extensions]\n.TPL = mako, jinja2\nmustache = pybars\n")
    assert load_overrides(path) == {
        ".tpl": ("mako", "jinja2"),
        ".mustache": ("pybars",),
    }


def test_json_overrides(tmp_path: Path):
    path = tmp_path / "temper.json"
    path.write_text('{"extensions": {".tpl": ["jinja2"]}}')
    assert load_overrides(path) == {".tpl": ("jinja2",)}


def test_yaml_overrides(tmp_path: Path):
    try:
        import yaml  # type: ignore  # noqa: F401
    except ModuleNotFoundError:
        pytest.skip("PyYAML not installed")
    path = tmp_path / "temper.yaml"
    path.write_text("extensions:\n  .tpl: [chevron]\n")
    assert load_overrides(path) == {".tpl": ("chevron",)}


def test_unknown_backend_rejected(tmp_path: Path):
    path = tmp_path / "temper.ini"
    path.write_text("[extensions]\n.ejs = ejs\n")
    with pytest.raises(TemperConfigError):
        load_overrides(path)


def test_invalid_json(tmp_path: Path):
    path = tmp_path / "temper.json"
    path.write_text("{ invalid")
    with pytest.raises(TemperConfigError):
        load_overrides(path)


def test_unsupported_format(tmp_path: Path):
    path = tmp_path / "temper.toml"
    path.write_text("")
    with pytest.raises(TemperConfigError):
        load_overrides(path)


def test_config_file_from_env(tmp_path: Path, monkeypatch):
    path = tmp_path / "custom.ini"
    monkeypatch.setenv("TEMPER_CONFIG", str(path))
    assert config_file() == path.resolve()


def test_from_config_applies_overrides(tmp_path: Path, monkeypatch):
    path = tmp_path / "temper.ini"
    path.write_text("[extensions]\n.tpl = mako, jinja2\n")
    monkeypatch.setenv("TEMPER_CONFIG", str(path))
    importer = CountingImporter("jinja2")
    temper = Temper.from_config(loader=BackendLoader(importer))
    assert temper.discover("index.tpl") == "jinja2"
    assert importer.calls == ["mako", "jinja2"]
    assert temper.registry.lookup(".mustache") == ("chevron", "pybars")
