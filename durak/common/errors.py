"""Exceptions shared by the Durak engine."""


class InvariantViolation(Exception):
    """
    Raised when an operation breaks a precondition of the game model.

    These indicate a bug in the caller (drawing from an empty deck, playing
    a card that is not held, covering a slot that is already covered) and
    are never part of normal play. Callers are expected to consult
    `DurakEngine.is_valid_move` before submitting an action.
    """
