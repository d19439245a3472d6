"""Undo log for record store mutations."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional

from models.record import Record


class UndoAction(Enum):
    """The mutation an undo entry reverses."""

    ADD = "add"
    DELETE = "delete"


@dataclass(frozen=True)
class UndoEntry:
    action: UndoAction
    record: Record


class UndoLog:
    """Last-in-first-out log of reversible record mutations."""

    def __init__(self):
        self._entries: List[UndoEntry] = []

    def push(self, action: UndoAction, record: Record) -> UndoEntry:
        """Record a mutation.

        The entry keeps its own copy of the record so that later changes to
        the store cannot affect it.

        Args:
            action: The mutation that was performed.
            record: The record it affected.

        Returns:
            The pushed entry.
        """
        entry = UndoEntry(action=action, record=replace(record))
        self._entries.append(entry)
        return entry

    def pop(self) -> Optional[UndoEntry]:
        """Remove and return the most recent entry, or None if the log is empty."""
        if not self._entries:
            return None
        return self._entries.pop()

    def __len__(self) -> int:
        return len(self._entries)
