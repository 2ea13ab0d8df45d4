"""
Test utilities for :py:mod:`scoped.resource`.
"""

from typing import Generic, TypeVar

from scoped.resource import Resource, Error
from scoped.runner import run

_T = TypeVar("_T")


class ResourceTestBase(Generic[_T]):
    """
    A base class for tests of :py:class:`scoped.resource.Resource` implementations.
    """

    def _new_sut(self) -> Resource[_T]:
        raise NotImplementedError

    def test_acquire(self) -> None:
        """
        Test implementations of :py:meth:`scoped.resource.Resource.acquire`.
        """
        sut = self._new_sut()
        acquisition = sut.acquire()
        try:
            assert isinstance(acquisition, tuple)
            assert len(acquisition) == 2
            assert acquisition[1] is None or isinstance(acquisition[1], BaseException)
        finally:
            sut.release(acquisition[0], acquisition[1])

    def test_release_without_error(self) -> None:
        """
        Test implementations of :py:meth:`scoped.resource.Resource.release`.
        """
        sut = self._new_sut()
        value, error = sut.acquire()
        released_error = sut.release(value, error)
        assert released_error is None or isinstance(released_error, BaseException)

    def test_release_with_error_after_failed_acquisition(self) -> None:
        """
        Test implementations of :py:meth:`scoped.resource.Resource.release`.
        """
        sut = self._new_sut()
        error = RuntimeError("Could not acquire the resource.")
        released_error = sut.release(None, error)
        assert released_error is None or isinstance(released_error, BaseException)

    def test_run(self) -> None:
        """
        Test running implementations with :py:func:`scoped.runner.run`.
        """
        calls = []

        def _action(value: _T) -> Error:
            calls.append(value)
            return None

        released_error = run(self._new_sut(), _action)
        assert len(calls) <= 1
        assert released_error is None or isinstance(released_error, BaseException)
