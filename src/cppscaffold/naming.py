"""Class name validation and file naming conventions."""

from __future__ import annotations

import re
from enum import Enum

from .errors import ClassNameError, NameErrorKind

__all__ = [
    "MAX_CLASS_NAME_LENGTH",
    "NamingScheme",
    "kebab_case",
    "to_file_base_name",
    "validate_class_name",
]


MAX_CLASS_NAME_LENGTH = 60

_WHITESPACE = re.compile(r"\s")
_UPPERCASE_RUN = re.compile(r"(?<=[^A-Z])[A-Z]+")


class NamingScheme(str, Enum):
    """File naming conventions applied to the class name."""

    PASCAL_CASE = "PascalCase"
    KEBAB_CASE = "KebabCase"


def validate_class_name(name: str | None) -> None:
    """Raise :class:`ClassNameError` when ``name`` cannot be used as a class name.

    Only the checks needed to produce sane file names are enforced: the name
    must be present, at most :data:`MAX_CLASS_NAME_LENGTH` characters long and
    free of whitespace. It is *not* checked against the C++ identifier grammar.
    """

    if not name:
        raise ClassNameError(NameErrorKind.EMPTY, "Class name must not be empty")
    if len(name) > MAX_CLASS_NAME_LENGTH:
        raise ClassNameError(
            NameErrorKind.TOO_LONG,
            f"Class name too long ({len(name)} > {MAX_CLASS_NAME_LENGTH} characters)",
        )
    if _WHITESPACE.search(name):
        raise ClassNameError(
            NameErrorKind.CONTAINS_WHITESPACE, "Class name should not contain spaces"
        )


def kebab_case(name: str) -> str:
    """Return ``name`` in kebab-case.

    A hyphen goes in front of every maximal run of uppercase letters except a
    run that starts the string, then everything is lowercased. Runs are never
    split, so ``HTTPServer`` becomes ``httpserver``.
    """

    return _UPPERCASE_RUN.sub(lambda match: f"-{match.group(0)}", name).lower()


def to_file_base_name(name: str, scheme: NamingScheme | str = NamingScheme.PASCAL_CASE) -> str:
    """Return the extension-less file name used for the class ``name``."""

    scheme = NamingScheme(scheme)
    if scheme is NamingScheme.KEBAB_CASE:
        return kebab_case(name)
    return name
