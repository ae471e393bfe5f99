"""Create paired C++ header/source stubs for new classes.

The package validates class names, derives file names from a naming scheme,
renders header and source templates with configurable include guards and
writes both files into a target directory. It can be used programmatically or
through the ``cppscaffold`` command line interface.
"""

from __future__ import annotations

from .command import ClassCreator, CreationReport, resolve_directory
from .config import ClassSpec, HeaderGuardStyle, Settings, load_settings
from .errors import (
    ClassNameError,
    ConfigError,
    CreationAborted,
    ScaffoldError,
    StubWriteError,
    TargetDirectoryError,
)
from .naming import NamingScheme, to_file_base_name, validate_class_name
from .scaffold import StubWriteResult, write_stub
from .template import RenderedStub, render_header, render_source, render_stub

__all__ = [
    "ClassCreator",
    "ClassNameError",
    "ClassSpec",
    "ConfigError",
    "CreationAborted",
    "CreationReport",
    "HeaderGuardStyle",
    "NamingScheme",
    "RenderedStub",
    "ScaffoldError",
    "Settings",
    "StubWriteError",
    "StubWriteResult",
    "TargetDirectoryError",
    "load_settings",
    "render_header",
    "render_source",
    "render_stub",
    "resolve_directory",
    "to_file_base_name",
    "validate_class_name",
    "write_stub",
]

__version__ = "0.1.0"
