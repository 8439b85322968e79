from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from remote_control.commands import Command

logger = logging.getLogger(__name__)

__all__ = [
    "DispatchStatus",
    "RemoteControl",
    "CommandQueue",
]


# ==========================
# Module: invoker
# Purpose: Dispatch registered commands by index with single-step undo,
#          plus a batch queue that runs everything it holds once.
# ==========================


class DispatchStatus(Enum):
    """
    Outcome of a dispatch or undo request.

    Usage conditions are returned, not raised: the remote keeps working afterwards.
    """
    OK = "ok"
    NOT_FOUND = "not_found"
    NOTHING_TO_UNDO = "nothing_to_undo"

    @property
    def ok(self) -> bool:
        return self is DispatchStatus.OK


class RemoteControl:
    """
    Invoker holding indexed commands and a one-step undo slot.

    Indices are assigned in registration order starting at 0 and never change.
    Only the most recently dispatched command can be undone; dispatching again
    overwrites the slot. Instances are not thread-safe: the slot is shared by
    every caller of the same remote.
    """

    def __init__(self) -> None:
        self._commands: List[Command] = []
        self._last: Optional[Command] = None

    def register(self, command: Command) -> int:
        """
        Appends a command and returns its index.

        The same instance may be registered more than once.

        :param command: Command to register.
        :return: Assigned index.
        :raises TypeError: If `command` is not a Command.
        """
        if not isinstance(command, Command):
            raise TypeError(f"Expected a Command, got {type(command).__name__}")
        self._commands.append(command)
        index = len(self._commands) - 1
        logger.debug("Registered %s at index %d", command.description, index)
        return index

    @property
    def count(self) -> int:
        """
        :return: Number of registered commands.
        """
        return len(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def last_executed(self) -> Optional[Command]:
        """
        :return: Command that `undo_last()` would undo, or None.
        """
        return self._last

    def command_at(self, index: int) -> Optional[Command]:
        """
        :param index: Registered index.
        :return: The command at `index`, or None when out of range.
        """
        if 0 <= index < len(self._commands):
            return self._commands[index]
        return None

    def dispatch(self, index: int) -> DispatchStatus:
        """
        Executes the command at `index` and makes it the undo target.

        The undo slot is updated even if `execute()` raises; the error then
        propagates to the caller.

        :param index: Registered index.
        :return: OK, or NOT_FOUND when the index is out of range.
        """
        command = self.command_at(index)
        if command is None:
            logger.warning("Command not found at index %s", index)
            return DispatchStatus.NOT_FOUND

        try:
            command.execute()
        finally:
            self._last = command
        logger.debug("Dispatched %s (index %d)", command.description, index)
        return DispatchStatus.OK

    def undo_last(self) -> DispatchStatus:
        """
        Undoes the most recently dispatched command and clears the undo slot.

        If `undo()` raises, the slot keeps the command and the error propagates.

        :return: OK, or NOTHING_TO_UNDO when the slot is empty.
        """
        if self._last is None:
            logger.warning("No command to undo")
            return DispatchStatus.NOTHING_TO_UNDO
        command = self._last
        command.undo()
        self._last = None
        logger.debug("Undid %s", command.description)
        return DispatchStatus.OK


class CommandQueue:
    """
    Batch invoker: collects commands and executes them all in one call.

    Executed commands leave the queue; there is no undo.
    """

    def __init__(self) -> None:
        self._pending: List[Command] = []

    def add(self, command: Command) -> None:
        """
        Queues a command.

        :param command: Command to queue.
        """
        self._pending.append(command)

    def __len__(self) -> int:
        return len(self._pending)

    def execute_all(self) -> int:
        """
        Executes queued commands in insertion order and removes them.

        If a command raises, it and every command after it stay queued and
        the error propagates.

        :return: Number of commands executed.
        """
        logger.debug("Executing %d queued commands", len(self._pending))
        executed = 0
        while self._pending:
            self._pending[0].execute()
            self._pending.pop(0)
            executed += 1
        return executed
