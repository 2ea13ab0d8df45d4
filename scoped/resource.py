"""
Provide the Resource API.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeAlias, TypeVar

_T = TypeVar("_T")


Error: TypeAlias = BaseException | None
"""
An error as a value. ``None`` means there is no error.
"""


Action: TypeAlias = Callable[[_T], Error]
"""
Logic to run between acquiring and releasing a resource.

An action receives the acquired value, and returns an error, or ``None`` if it succeeded.
"""


class Resource(Generic[_T], ABC):
    """
    A resource that can be acquired and released.

    Run a resource with :py:func:`scoped.runner.run`.

    To test your own subclasses, use :py:class:`scoped.test_utils.resource.ResourceTestBase`.
    """

    @abstractmethod
    def acquire(self) -> tuple[_T | None, Error]:
        """
        Acquire the resource.

        Return the acquired value and ``None``, or ``None`` and the error that prevented
        acquisition.
        """
        pass

    @abstractmethod
    def release(self, value: _T | None, error: Error) -> Error:
        """
        Release the resource.

        This is called exactly once for every acquisition, including failed ones. In that case
        ``value`` is ``None``, and ``error`` is the acquisition's error. Otherwise ``error`` is
        the action's error, if there was one.

        Return the error that must reach the caller. This is usually ``error`` itself, but
        implementations MAY replace it, or suppress it by returning ``None``.
        """
        pass
