from __future__ import annotations


class PyramidError(ValueError):
    """Base class for rejected game operations. The game state is unchanged when raised."""
    kind = "PyramidError"


class InvalidDeckError(PyramidError):
    kind = "InvalidDeck"


class InsufficientCardsError(PyramidError):
    kind = "InsufficientCards"


class InvalidLayoutError(PyramidError):
    kind = "InvalidLayout"


class NotStartedError(PyramidError):
    kind = "NotStarted"


class OutOfBoundsError(PyramidError):
    kind = "OutOfBounds"


class EmptySlotError(PyramidError):
    kind = "EmptySlot"


class InvalidMoveError(PyramidError):
    kind = "InvalidMove"


class CoveredError(PyramidError):
    kind = "Covered"
