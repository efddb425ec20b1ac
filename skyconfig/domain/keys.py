"""Unique identifier sources for generated API and master keys."""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Iterator
from typing import Protocol


class KeySourcePort(Protocol):
    """Port definition for producing fresh unique identifiers."""

    def key_next_identifier(self) -> str:
        """Return the next unique identifier.

        Returns:
            str: Identifier that has not been returned before.

        Raises:
            RuntimeError: Raised when the source cannot produce an identifier.
        """


class UUIDKeySource(KeySourcePort):
    """Key source backed by random version 4 UUIDs."""

    def key_next_identifier(self) -> str:
        """Return a fresh random UUID in canonical text form.

        Returns:
            str: Lower-case hyphenated UUID4 text.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return str(uuid.uuid4())


class SequenceKeySource(KeySourcePort):
    """Deterministic key source replaying a fixed identifier sequence."""

    def __init__(self, identifiers: Iterable[str]):
        """Initialize sequence key source.

        Args:
            identifiers: Identifiers returned in order.
        """

        self._identifiers: Iterator[str] = iter(identifiers)

    def key_next_identifier(self) -> str:
        """Return the next identifier from the sequence.

        Returns:
            str: Next identifier.

        Raises:
            RuntimeError: Raised when the sequence is exhausted.
        """

        try:
            return next(self._identifiers)
        except StopIteration as error:
            raise RuntimeError("key source sequence is exhausted") from error
