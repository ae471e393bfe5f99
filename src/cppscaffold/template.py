"""Header and source templates for C++ class stubs."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Mapping, MutableMapping

from .config import ClassSpec, HeaderGuardStyle, Settings

__all__ = [
    "RenderedStub",
    "StubRenderer",
    "TemplateRenderer",
    "TemplateRenderingError",
    "render_header",
    "render_source",
    "render_stub",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")

HEADER_BODY_TEMPLATE = """class {{ class_name }}
{
\tprivate:

\tpublic:

\t\t{{ class_name }}();
\t\t~{{ class_name }}();

};
"""

SOURCE_TEMPLATE = """#include "{{ header_name }}"

{{ class_name }}::{{ class_name }}()
{
}

{{ class_name }}::~{{ class_name }}()
{
}
"""

_IFNDEF_OPEN = "#ifndef {{ class_name|upper }}_H\n#define {{ class_name|upper }}_H\n"
_PRAGMA_ONCE = "#pragma once\n"
_IFNDEF_CLOSE = "\n#endif\n"

# (prefix, suffix) wrapped around the header body for each guard style.
GUARD_TEMPLATES: Mapping[HeaderGuardStyle, tuple[str, str]] = {
    HeaderGuardStyle.NONE: ("", ""),
    HeaderGuardStyle.IFNDEF: (_IFNDEF_OPEN + "\n", _IFNDEF_CLOSE),
    HeaderGuardStyle.PRAGMA_ONCE: (_PRAGMA_ONCE + "\n", ""),
    HeaderGuardStyle.BOTH: (_IFNDEF_OPEN + _PRAGMA_ONCE + "\n", _IFNDEF_CLOSE),
}


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ name }}`` and ``{{ name|filter }}`` placeholders.

    Every placeholder must resolve; an unknown name or filter raises
    :class:`TemplateRenderingError`.
    """

    filters: MutableMapping[str, Callable[[str], str]] = field(
        default_factory=lambda: {"upper": str.upper}
    )

    def render_string(self, template: str, context: Mapping[str, str]) -> str:
        def substitute(match: re.Match[str]) -> str:
            key, *filter_names = (part.strip() for part in match.group("expression").split("|"))
            if key not in context:
                raise TemplateRenderingError(f"missing value for '{key}'")

            value = context[key]
            for filter_name in filter_names:
                try:
                    value = self.filters[filter_name](value)
                except KeyError as exc:
                    raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc
            return value

        return _PLACEHOLDER_PATTERN.sub(substitute, template)


@dataclass(slots=True, frozen=True)
class RenderedStub:
    """Header and source text produced for one class."""

    header_text: str
    source_text: str
    header_extension: str = ".h"


@dataclass(slots=True)
class StubRenderer:
    """Produce the header/source pair for a class."""

    renderer: TemplateRenderer = field(default_factory=TemplateRenderer)

    def render_header(
        self, class_name: str, guard_style: HeaderGuardStyle = HeaderGuardStyle.IFNDEF
    ) -> str:
        prefix, suffix = GUARD_TEMPLATES[HeaderGuardStyle(guard_style)]
        template = prefix + HEADER_BODY_TEMPLATE + suffix
        return self.renderer.render_string(template, {"class_name": class_name})

    def render_source(self, class_name: str, file_name: str, header_extension: str = ".h") -> str:
        context = {"class_name": class_name, "header_name": f"{file_name}{header_extension}"}
        return self.renderer.render_string(SOURCE_TEMPLATE, context)

    def render(self, spec: ClassSpec, settings: Settings) -> RenderedStub:
        """Render both files for ``spec`` as configured by ``settings``."""

        return RenderedStub(
            header_text=self.render_header(spec.class_name, settings.guard_style),
            source_text=self.render_source(
                spec.class_name, spec.file_name, settings.header_extension
            ),
            header_extension=settings.header_extension,
        )


_DEFAULT_RENDERER = StubRenderer()


def render_header(class_name: str, guard_style: HeaderGuardStyle = HeaderGuardStyle.IFNDEF) -> str:
    """Return the header text for ``class_name`` wrapped per ``guard_style``."""

    return _DEFAULT_RENDERER.render_header(class_name, guard_style)


def render_source(class_name: str, file_name: str, header_extension: str = ".h") -> str:
    """Return the source text including ``file_name + header_extension``."""

    return _DEFAULT_RENDERER.render_source(class_name, file_name, header_extension)


def render_stub(spec: ClassSpec, settings: Settings) -> RenderedStub:
    return _DEFAULT_RENDERER.render(spec, settings)
