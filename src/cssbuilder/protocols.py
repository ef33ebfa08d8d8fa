"""Protocols for cssbuilder.

Defines the contract combine() needs from its operands.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Stringifiable(Protocol):
    """Anything that renders itself as selector text.

    combine() only reads the rendered text of its operands, never their
    fragment state, so any object with a stringify() method will do.

    """

    def stringify(self) -> str:
        """Return the rendered selector text."""
        ...
