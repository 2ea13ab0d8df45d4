"""
Provide context manager utilities.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Generic, TypeVar, final

from typing_extensions import override

from scoped.resource import Resource, Error

_ContextT = TypeVar("_ContextT")


@final
class ContextManagerResource(Resource[_ContextT], Generic[_ContextT]):
    """
    Make a context manager a resource.

    Entering the context manager acquires the resource, and exiting it releases the resource.
    If entering fails, the context manager is not exited, just like with a ``with`` statement.
    If the context manager's exit suppresses an error, so does the resource's release.
    """

    __slots__ = "_context_manager", "_entered"

    def __init__(self, context_manager: AbstractContextManager[_ContextT]):
        self._context_manager = context_manager
        self._entered = False

    @override
    def acquire(self) -> tuple[_ContextT | None, Error]:
        try:
            value = self._context_manager.__enter__()
        except Exception as error:
            return None, error
        self._entered = True
        return value, None

    @override
    def release(self, value: _ContextT | None, error: Error) -> Error:
        if not self._entered:
            return error
        self._entered = False
        if error is None:
            self._context_manager.__exit__(None, None, None)
            return None
        if self._context_manager.__exit__(type(error), error, error.__traceback__):
            return None
        return error
