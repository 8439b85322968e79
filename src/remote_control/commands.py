from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Tuple

__all__ = [
    "Command",
    "MacroCommand",
]


# ==========================
# Module: commands
# Purpose: Executable actions as objects, each paired with its inverse,
#          and a composite that executes/undoes a fixed group as one unit.
# ==========================


class Command(ABC):
    """
    Base interface for executable actions with undo support.

    Contract: `undo()` called right after `execute()` returns the receiver
    to its pre-execute observable state. Errors raised by the receiver are
    not caught here.

    :param description: Human-readable description of the command.
    """

    def __init__(self, description: str) -> None:
        self._description = description

    @property
    def description(self) -> str:
        """
        :return: Command description string.
        """
        return self._description

    @abstractmethod
    def execute(self) -> None:
        """
        Performs the primary action on the receiver.
        """

    @abstractmethod
    def undo(self) -> None:
        """
        Performs the inverse action on the receiver.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(description={self._description!r})"


class MacroCommand(Command):
    """
    Executes a fixed group of commands in order and undoes them in reverse order.

    The sequence is copied at construction; later changes to the caller's
    list do not affect the macro. If a member fails, the error propagates
    and members that already ran keep their effects.

    :param items: Ordered commands to group. May be empty.
    :param description: Short description for the macro.
    """

    def __init__(self, items: Optional[Iterable[Command]] = None, description: str = "Macro") -> None:
        super().__init__(description=description)
        self._items: Tuple[Command, ...] = tuple(items) if items else ()

    @property
    def commands(self) -> Tuple[Command, ...]:
        """
        :return: The grouped commands in execution order.
        """
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def execute(self) -> None:
        """Execute each command in registration order."""
        for cmd in self._items:
            cmd.execute()

    def undo(self) -> None:
        """Undo each command in reverse registration order."""
        for cmd in reversed(self._items):
            cmd.undo()
