"""Immutable environment lookups and declarations-file loading.

Section readers never consult `os.environ` directly. The orchestrator snapshots
the process environment together with the declarations file into one
`EnvironmentSource`, and every reader receives that object explicitly.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from dotenv import dotenv_values

from skyconfig.domain import DeclarationsFileError

logger = logging.getLogger(__name__)

DEFAULT_DECLARATIONS_FILE = ".env"


class EnvironmentSource(Mapping[str, str]):
    """Read-only snapshot of environment key/value pairs."""

    def __init__(self, values: Mapping[str, str] | None = None):
        """Initialize environment snapshot.

        Args:
            values: Key/value pairs to snapshot. The mapping is copied.
        """

        self._values: Mapping[str, str] = MappingProxyType(dict(values or {}))

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"EnvironmentSource({len(self._values)} entries)"

    def environment_get(self, name: str) -> str:
        """Return one value, treating an unset name as empty text.

        Args:
            name: Environment variable name.

        Returns:
            str: Variable value, or an empty string when unset.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return self._values.get(name, "")

    def environment_scan_prefix(self, prefix: str) -> list[tuple[str, str]]:
        """Collect every entry whose name starts with a prefix.

        Args:
            prefix: Case-sensitive name prefix.

        Returns:
            list[tuple[str, str]]: `(name remainder, value)` pairs in snapshot order.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return [(name[len(prefix):], value) for name, value in self._values.items() if name.startswith(prefix)]


def config_load_declarations_file(path: str | os.PathLike[str]) -> dict[str, str]:
    """Load key/value declarations from one dotenv-style file.

    Values are taken literally; `${NAME}` references are not expanded.
    Declarations without a value (a bare key line) are ignored.

    Args:
        path: Declarations file path.

    Returns:
        dict[str, str]: Declared key/value pairs in file order.

    Raises:
        DeclarationsFileError: Raised when the file is missing, unreadable or not valid UTF-8.
    """

    declarations_path = Path(path)
    if not declarations_path.is_file():
        raise DeclarationsFileError(f"declarations file not found: {declarations_path}", path=str(declarations_path))

    try:
        declared_values = dotenv_values(declarations_path, encoding="utf-8", interpolate=False)
    except (OSError, UnicodeDecodeError) as error:
        raise DeclarationsFileError(
            f"declarations file could not be read: {declarations_path}: {error}",
            path=str(declarations_path),
        ) from error

    return {name: value for name, value in declared_values.items() if value is not None}


def config_environment_from_process(
    dotenv_path: str | os.PathLike[str] | None = DEFAULT_DECLARATIONS_FILE,
    process_environment: Mapping[str, str] | None = None,
) -> EnvironmentSource:
    """Snapshot the process environment layered over the declarations file.

    Process values strictly override file values. A declarations file that
    cannot be loaded is logged and skipped.

    Args:
        dotenv_path: Declarations file path, or None to skip file loading.
        process_environment: Environment mapping; defaults to `os.environ`.

    Returns:
        EnvironmentSource: Merged read-only snapshot.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    declared_values: dict[str, str] = {}
    if dotenv_path is not None:
        try:
            declared_values = config_load_declarations_file(dotenv_path)
        except DeclarationsFileError as error:
            logger.warning("Error in loading declarations file: %s", error)

    merged_values = dict(declared_values)
    merged_values.update(os.environ if process_environment is None else process_environment)
    return EnvironmentSource(merged_values)


__all__ = [
    "DEFAULT_DECLARATIONS_FILE",
    "EnvironmentSource",
    "config_environment_from_process",
    "config_load_declarations_file",
]
