"""
Static Mocks - replace every static method of a class for a while.

A StaticMock patches each staticmethod defined on its target with
unittest.mock.patch.object and keeps the patches active until close().
Only one live StaticMock may exist per target; a second open() on the same
class raises StaticMockError until the first one is closed.

Usage:
    static = StaticMock(Validator)
    static.open()
    static.validate_positive.return_value = None
    ...
    static.close()

    # or
    with StaticMock(Validator) as static:
        ...
"""

import logging
from typing import Any, Dict, Iterable, List
from unittest.mock import patch

from mock_lifecycle.errors import StaticMockError

logger = logging.getLogger(__name__)

# Process-wide: patch.object replaces class attributes for every thread.
_registry: Dict[type, "StaticMock"] = {}


def static_method_names(target: type) -> List[str]:
    """Return the names of the static methods defined directly on target."""
    return [
        name for name, value in vars(target).items()
        if isinstance(value, staticmethod)
    ]


class StaticMock:
    """Patches all static methods of one class until closed."""

    def __init__(self, target: type, autospec: bool = True):
        self.target = target
        self.autospec = autospec
        self._patchers: Dict[str, Any] = {}
        self._mocks: Dict[str, Any] = {}
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def mocks(self) -> Dict[str, Any]:
        """Mocks of the patched methods, keyed by method name."""
        return dict(self._mocks)

    def open(self) -> "StaticMock":
        """
        Start patching the target's static methods.

        Returns:
            self, so the call can be chained.

        Raises:
            StaticMockError: If this mock is already open, the target is
                already statically mocked, or it has no static methods.
        """
        if not self._closed:
            raise StaticMockError(f"Static mock of {self.target.__qualname__} is already open")

        names = static_method_names(self.target)
        if not names:
            raise StaticMockError(
                f"{self.target.__qualname__} has no static methods to mock"
            )

        if self.target in _registry:
            raise StaticMockError(
                f"Static mocking is already registered for {self.target.__qualname__}; "
                f"close the existing static mock before creating a new one"
            )
        _registry[self.target] = self

        try:
            for name in names:
                patcher = patch.object(self.target, name, autospec=self.autospec or None)
                self._mocks[name] = patcher.start()
                self._patchers[name] = patcher
        except Exception:
            self._stop_patchers()
            _registry.pop(self.target, None)
            raise

        self._closed = False
        logger.debug(f"Static mock opened for {self.target.__qualname__}: {', '.join(names)}")
        return self

    def close(self) -> None:
        """Stop all patches and release the target. Safe to call twice."""
        if self._closed:
            return

        self._stop_patchers()
        if _registry.get(self.target) is self:
            del _registry[self.target]
        self._closed = True
        logger.debug(f"Static mock closed for {self.target.__qualname__}")

    def _stop_patchers(self) -> None:
        for name in reversed(list(self._patchers)):
            self._patchers.pop(name).stop()
        self._mocks.clear()

    def __getattr__(self, name: str) -> Any:
        mocks = self.__dict__.get("_mocks", {})
        if name in mocks:
            return mocks[name]
        raise AttributeError(
            f"{type(self).__name__} of {self.__dict__.get('target')!r} has no mocked method {name!r}"
        )

    def __enter__(self) -> "StaticMock":
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<StaticMock {self.target.__qualname__} ({state})>"


def active_static_mocks() -> List[StaticMock]:
    """Return the static mocks that are currently open."""
    return list(_registry.values())


def close_leaked_static_mocks(keep: Iterable[StaticMock] = ()) -> int:
    """
    Close every open static mock not listed in keep.

    Args:
        keep: Static mocks that must stay open, e.g. ones opened before
            a nested pytest session started.

    Returns:
        Number of static mocks that were closed.
    """
    kept = {id(static) for static in keep}
    leaked = [static for static in active_static_mocks() if id(static) not in kept]
    for static in leaked:
        logger.debug(f"Closing leaked {static!r}")
        static.close()
    return len(leaked)
