"""Settings and value objects shared by the renderer, writer and CLI."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .naming import NamingScheme, to_file_base_name, validate_class_name

__all__ = [
    "CONFIG_FILE_NAME",
    "ClassSpec",
    "HeaderGuardStyle",
    "HeaderProtection",
    "Settings",
    "load_settings",
]


CONFIG_FILE_NAME = ".cppscaffold.toml"
_CONFIG_TABLE = "cppscaffold"
_ASK_SENTINEL = "ask"


class HeaderGuardStyle(str, Enum):
    """Which include guard wraps a generated header."""

    NONE = "none"
    IFNDEF = "ifndef"
    PRAGMA_ONCE = "pragmaOnce"
    BOTH = "both"

    @classmethod
    def from_flags(cls, use_ifndef: bool, use_pragma_once: bool) -> "HeaderGuardStyle":
        if use_ifndef and use_pragma_once:
            return cls.BOTH
        if use_ifndef:
            return cls.IFNDEF
        if use_pragma_once:
            return cls.PRAGMA_ONCE
        return cls.NONE


class HeaderProtection(BaseModel):
    """Include guard switches."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    use_ifndef: bool = Field(
        True,
        validation_alias=AliasChoices("useIfndef", "useIfnDef", "use_ifndef"),
        description="Wrap the header in #ifndef/#define/#endif markers.",
    )
    use_pragma_once: bool = Field(
        False,
        validation_alias=AliasChoices("usePragmaOnce", "use_pragma_once"),
        description="Emit a #pragma once directive.",
    )


class Settings(BaseModel):
    """Configuration threaded explicitly through rendering and file creation."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    header_protection: HeaderProtection = Field(
        default_factory=HeaderProtection,
        alias="headerProtection",
        description="Include guard configuration.",
    )
    use_hpp_ending: bool = Field(
        False, alias="useHPPEnding", description="Use .hpp instead of .h for headers."
    )
    naming_scheme: NamingScheme = Field(
        NamingScheme.PASCAL_CASE,
        alias="namingScheme",
        description="File naming convention derived from the class name.",
    )
    set_path: bool | str = Field(
        False,
        alias="setPath",
        description="False: workspace root, True: ask for a path, string: use that path.",
    )
    create_folder: bool = Field(
        False,
        alias="createFolder",
        description="Nest the files in a folder named after the class (workspace root only).",
    )

    @field_validator("set_path")
    @classmethod
    def _normalise_set_path(cls, value: bool | str) -> bool | str:
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped:
                return False
            if stripped.lower() == _ASK_SENTINEL:
                return True
            return stripped
        return value

    @property
    def guard_style(self) -> HeaderGuardStyle:
        return HeaderGuardStyle.from_flags(
            self.header_protection.use_ifndef, self.header_protection.use_pragma_once
        )

    @property
    def header_extension(self) -> str:
        return ".hpp" if self.use_hpp_ending else ".h"

    def merged(self, **overrides: Any) -> "Settings":
        """Return a copy with ``overrides`` applied, ignoring ``None`` values.

        ``use_ifndef`` and ``use_pragma_once`` are accepted at the top level
        and routed into :attr:`header_protection`.
        """

        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self

        protection = {
            key: values.pop(key) for key in ("use_ifndef", "use_pragma_once") if key in values
        }
        data = self.model_dump()
        if protection:
            data["header_protection"] = {**data["header_protection"], **protection}
        data.update(values)
        try:
            return Settings.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"invalid settings override: {exc}") from exc


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"cannot read settings file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc

    table = data.get(_CONFIG_TABLE, data)
    if not isinstance(table, Mapping):
        raise ConfigError(f"[{_CONFIG_TABLE}] in {path} must be a table")
    return table


def load_settings(
    path: str | Path | None = None,
    *,
    workspace_root: str | Path | None = None,
) -> Settings:
    """Load :class:`Settings` from ``path`` or the workspace settings file.

    When ``path`` is omitted, ``<workspace_root>/.cppscaffold.toml`` is used if
    it exists; otherwise the defaults are returned. Values may sit at the top
    level of the file or under a ``[cppscaffold]`` table.
    """

    if path is not None:
        try:
            config_path = Path(path).expanduser()
        except RuntimeError as exc:
            raise ConfigError(f"cannot expand settings path {path}: {exc}") from exc
        if not config_path.is_file():
            raise ConfigError(f"settings file {config_path} does not exist")
    else:
        root = Path(workspace_root) if workspace_root is not None else Path.cwd()
        config_path = root / CONFIG_FILE_NAME
        if not config_path.is_file():
            return Settings()

    table = _read_toml(config_path)
    try:
        return Settings.model_validate(table)
    except ValidationError as exc:
        raise ConfigError(f"invalid settings in {config_path}: {exc}") from exc


@dataclass(slots=True, frozen=True)
class ClassSpec:
    """Identifiers describing the class stub to generate.

    Attributes
    ----------
    class_name:
        The C++ class name exactly as typed by the user.
    file_name:
        Extension-less base name for both files, derived from
        :attr:`class_name` through the configured naming scheme.
    directory:
        Directory that receives the header and source files.
    """

    class_name: str
    file_name: str
    directory: Path

    @classmethod
    def from_name(
        cls,
        class_name: str,
        directory: str | Path,
        *,
        scheme: NamingScheme | str = NamingScheme.PASCAL_CASE,
    ) -> "ClassSpec":
        """Validate ``class_name`` and derive the file name from it."""

        validate_class_name(class_name)
        return cls(
            class_name=class_name,
            file_name=to_file_base_name(class_name, scheme),
            directory=Path(directory),
        )
