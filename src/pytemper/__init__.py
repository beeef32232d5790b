from .backends import Compilation
from .core import Temper
from .errors import (
    BackendNotInstalled,
    NoBackendAvailable,
    TemperConfigError,
    TemperError,
    UnknownExtension,
)
from .loader import BackendLoader
from .registry import Registry, extension_of

__all__ = [
    "BackendLoader",
    "BackendNotInstalled",
    "Compilation",
    "NoBackendAvailable",
    "Registry",
    "Temper",
    "TemperConfigError",
    "TemperError",
    "UnknownExtension",
    "extension_of",
]
