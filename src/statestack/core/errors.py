"""Exceptions raised by the state stack."""


class StateStackError(Exception):
    """Base class for all state stack errors."""


class InvalidStateError(StateStackError, ValueError):
    """A missing or malformed state (or state resource) was supplied.

    Raised before the stack is touched, so the manager is left unchanged.
    """
