from __future__ import annotations

from io import TextIOWrapper
from threading import Lock
from typing import TYPE_CHECKING

from typing_extensions import override

from scoped.contextlib import ContextManagerResource
from scoped.resource import Resource, Error
from scoped.runner import run
from scoped.test_utils.resource import ResourceTestBase

if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType


class DummyContextManager:
    def __init__(self, *, enter_error: Exception | None = None, suppress: bool = False):
        self._enter_error = enter_error
        self._suppress = suppress
        self.entered = 0
        self.exited = 0
        self.exc_type: type[BaseException] | None = None
        self.exc_val: BaseException | None = None
        self.exc_tb: TracebackType | None = None

    def __enter__(self) -> str:
        self.entered += 1
        if self._enter_error is not None:
            raise self._enter_error
        return "Hello, world!"

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        self.exited += 1
        self.exc_type = exc_type
        self.exc_val = exc_val
        self.exc_tb = exc_tb
        return self._suppress


class TestContextManagerResource(ResourceTestBase[str]):
    @override
    def _new_sut(self) -> Resource[str]:
        return ContextManagerResource(DummyContextManager())

    def test(self) -> None:
        context_manager = DummyContextManager()
        seen = []

        def _action(value: str) -> Error:
            seen.append(value)
            return None

        assert run(ContextManagerResource(context_manager), _action) is None
        assert seen == ["Hello, world!"]
        assert context_manager.entered == 1
        assert context_manager.exited == 1
        assert context_manager.exc_type is None
        assert context_manager.exc_val is None
        assert context_manager.exc_tb is None

    def test_with_enter_error(self) -> None:
        enter_error = RuntimeError("error")
        context_manager = DummyContextManager(enter_error=enter_error)
        seen = []

        def _action(value: str) -> Error:
            seen.append(value)
            return None

        assert run(ContextManagerResource(context_manager), _action) is enter_error
        assert seen == []
        assert context_manager.entered == 1
        assert context_manager.exited == 0

    def test_with_action_error(self) -> None:
        action_error = RuntimeError("error")
        context_manager = DummyContextManager()
        error = run(ContextManagerResource(context_manager), lambda value: action_error)
        assert error is action_error
        assert context_manager.exited == 1
        assert context_manager.exc_type is RuntimeError
        assert context_manager.exc_val is action_error
        assert context_manager.exc_tb is None

    def test_with_raising_action(self) -> None:
        action_error = RuntimeError("error")
        context_manager = DummyContextManager()

        def _action(value: str) -> Error:
            raise action_error

        assert run(ContextManagerResource(context_manager), _action) is action_error
        assert context_manager.exc_val is action_error
        assert context_manager.exc_tb is action_error.__traceback__

    def test_with_suppressed_error(self) -> None:
        context_manager = DummyContextManager(suppress=True)
        error = run(
            ContextManagerResource(context_manager),
            lambda value: RuntimeError("error"),
        )
        assert error is None
        assert context_manager.exited == 1

    def test_release_without_acquisition(self) -> None:
        context_manager = DummyContextManager()
        sut = ContextManagerResource(context_manager)
        error = RuntimeError("error")
        assert sut.release(None, error) is error
        assert context_manager.exited == 0

    def test_with_lock(self) -> None:
        lock = Lock()

        def _action(value: bool) -> Error:
            assert lock.locked()
            return None

        assert run(ContextManagerResource(lock), _action) is None
        assert not lock.locked()

    def test_with_file(self, tmp_path: Path) -> None:
        file_path = tmp_path / "scoped.txt"

        def _action(f: TextIOWrapper) -> Error:
            f.write("Hello, world!")
            return None

        resource = ContextManagerResource(open(file_path, "w"))
        assert run(resource, _action) is None
        assert file_path.read_text() == "Hello, world!"
