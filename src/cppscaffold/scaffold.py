"""Persist rendered class stubs to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import DirectoryErrorKind, StubWriteError, TargetDirectoryError

__all__ = ["StubWriteResult", "WriteOutcome", "expand_directory", "write_stub"]


LOGGER = logging.getLogger(__name__)

SOURCE_EXTENSION = ".cpp"


@dataclass(slots=True, frozen=True)
class WriteOutcome:
    """What happened to a single file."""

    path: Path
    written: bool
    overwritten: bool = False
    error: OSError | ValueError | None = None


@dataclass(slots=True, frozen=True)
class StubWriteResult:
    """Outcome of writing the header/source pair."""

    header: WriteOutcome
    source: WriteOutcome

    @property
    def ok(self) -> bool:
        return self.header.written and self.source.written

    @property
    def paths(self) -> tuple[Path, Path]:
        return self.header.path, self.source.path

    def describe(self) -> str:
        """Return a short summary such as ``header written, source failed``."""

        parts = []
        for label, outcome in (("header", self.header), ("source", self.source)):
            parts.append(f"{label} {'written' if outcome.written else 'failed'}")
        return ", ".join(parts)


def expand_directory(directory: str | Path) -> Path:
    """Return ``directory`` with a leading ``~`` or ``~user`` expanded."""

    path = Path(directory)
    try:
        return path.expanduser()
    except RuntimeError as exc:
        raise TargetDirectoryError(
            DirectoryErrorKind.UNRESOLVABLE, path, f"cannot expand {path}: {exc}"
        ) from exc


def _prepare_directory(directory: Path) -> None:
    if directory.exists():
        if not directory.is_dir():
            raise TargetDirectoryError(
                DirectoryErrorKind.NOT_A_DIRECTORY,
                directory,
                f"{directory} exists and is not a directory",
            )
        return

    if not directory.parent.is_dir():
        raise TargetDirectoryError(
            DirectoryErrorKind.MISSING_PARENT,
            directory,
            f"cannot create {directory}: parent directory {directory.parent} does not exist",
        )
    try:
        directory.mkdir()
    except (OSError, ValueError) as exc:
        raise TargetDirectoryError(
            DirectoryErrorKind.CREATE_FAILED, directory, f"cannot create {directory}: {exc}"
        ) from exc
    LOGGER.info("Created directory %s", directory)


def _write_file(path: Path, text: str) -> WriteOutcome:
    existed = path.exists()
    try:
        # Encode first so an unencodable text never truncates an existing file.
        data = text.encode("utf-8")
        path.write_bytes(data)
    except (OSError, ValueError) as exc:
        LOGGER.error("Failed to write %s: %s", path, exc)
        return WriteOutcome(path=path, written=False, error=exc)

    if existed:
        LOGGER.warning("Overwrote existing file %s", path)
    else:
        LOGGER.info("Wrote %s", path)
    return WriteOutcome(path=path, written=True, overwritten=existed)


def write_stub(
    directory: str | Path,
    file_name: str,
    header_text: str,
    source_text: str,
    *,
    header_extension: str = ".h",
) -> StubWriteResult:
    """Write ``<file_name><header_extension>`` and ``<file_name>.cpp`` into ``directory``.

    ``directory`` is created when missing, but only if its parent already
    exists. Both files are attempted even if the first write fails; a failure
    of either raises :class:`StubWriteError` carrying both outcomes. Files
    already present are overwritten.
    """

    target = expand_directory(directory)
    _prepare_directory(target)

    result = StubWriteResult(
        header=_write_file(target / f"{file_name}{header_extension}", header_text),
        source=_write_file(target / f"{file_name}{SOURCE_EXTENSION}", source_text),
    )
    if not result.ok:
        failed = result.header if not result.header.written else result.source
        raise StubWriteError(result, f"{result.describe()}: {failed.error}")
    return result
