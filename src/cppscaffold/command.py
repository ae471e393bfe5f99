"""Create a class stub from user input and settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from .config import ClassSpec, Settings
from .errors import CreationAborted
from .naming import validate_class_name
from .scaffold import StubWriteResult, expand_directory, write_stub
from .template import RenderedStub, StubRenderer

__all__ = ["ClassCreator", "CreationReport", "Prompt", "resolve_directory"]


LOGGER = logging.getLogger(__name__)

# Returns the user's answer, or ``None`` when the prompt was dismissed.
Prompt = Callable[[], Optional[str]]


def _anchor(path: Path, root: Path) -> Path:
    path = expand_directory(path)
    if path.is_absolute():
        return path
    return root / path


def resolve_directory(
    settings: Settings,
    class_name: str,
    workspace_root: str | Path,
    *,
    context_path: str | Path | None = None,
    ask_path: Prompt | None = None,
) -> Path:
    """Return the directory that should receive the stub for ``class_name``.

    ``context_path`` is the file or folder the command was invoked on and
    takes precedence over :attr:`Settings.set_path`; a file resolves to its
    parent directory.
    """

    root = expand_directory(workspace_root)

    if context_path is not None:
        path = _anchor(Path(context_path), root)
        if path.exists() and not path.is_dir():
            return path.parent
        return path

    if settings.set_path is False:
        return root / class_name if settings.create_folder else root

    if settings.set_path is True:
        if ask_path is None:
            raise CreationAborted("a target path is required but cannot be asked for")
        answer = ask_path()
        if answer is None:
            raise CreationAborted("path prompt dismissed")
        answer = answer.strip()
        if not answer:
            return root
        return _anchor(Path(answer), root)

    return _anchor(Path(settings.set_path), root)


@dataclass(slots=True, frozen=True)
class CreationReport:
    """Everything produced by a successful :meth:`ClassCreator.create`."""

    spec: ClassSpec
    result: StubWriteResult

    @property
    def message(self) -> str:
        return f"Your class {self.spec.class_name} has been created!"


@dataclass(slots=True)
class ClassCreator:
    """Ask for a class name, resolve the target directory and write the stub.

    Steps run strictly in order: name prompt, validation, directory
    resolution, rendering, writing. A dismissed prompt raises
    :class:`CreationAborted` before anything touches the filesystem.
    """

    settings: Settings = field(default_factory=Settings)
    workspace_root: Path = field(default_factory=Path.cwd)
    ask_name: Prompt | None = None
    ask_path: Prompt | None = None
    renderer: StubRenderer = field(default_factory=StubRenderer)

    def _class_name(self, class_name: str | None) -> str:
        if class_name is not None:
            return class_name
        if self.ask_name is None:
            raise CreationAborted("no class name given")
        answer = self.ask_name()
        if answer is None:
            raise CreationAborted("class name prompt dismissed")
        return answer

    def prepare(
        self, class_name: str | None = None, *, context_path: str | Path | None = None
    ) -> tuple[ClassSpec, RenderedStub]:
        """Validate input and render the stub without writing anything."""

        name = self._class_name(class_name)
        validate_class_name(name)
        directory = resolve_directory(
            self.settings,
            name,
            self.workspace_root,
            context_path=context_path,
            ask_path=self.ask_path,
        )
        spec = ClassSpec.from_name(name, directory, scheme=self.settings.naming_scheme)
        LOGGER.debug("Rendering %s as %s in %s", spec.class_name, spec.file_name, spec.directory)
        return spec, self.renderer.render(spec, self.settings)

    def create(
        self, class_name: str | None = None, *, context_path: str | Path | None = None
    ) -> CreationReport:
        """Create the header and source files for a class."""

        spec, stub = self.prepare(class_name, context_path=context_path)
        result = write_stub(
            spec.directory,
            spec.file_name,
            stub.header_text,
            stub.source_text,
            header_extension=stub.header_extension,
        )
        LOGGER.info("Created class %s in %s", spec.class_name, spec.directory)
        return CreationReport(spec=spec, result=result)
