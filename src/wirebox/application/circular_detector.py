"""Application layer - Circular dependency detection."""

import threading
from contextlib import contextmanager
from typing import Iterator, List

from wirebox.domain import CircularDependencyError


class CircularDependencyDetector:
    """Tracks the service ids being resolved on the current thread.

    A service id entering resolution while it is already on the stack closes a
    cycle; the ids from its first occurrence onwards form the reported chain.

    Attributes:
        _local: Thread-local storage holding one resolution stack per thread.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    def _get_stack(self) -> List[str]:
        if not hasattr(self._local, "stack"):
            self._local.stack = []
        return self._local.stack

    @contextmanager
    def track(self, service_id: str) -> Iterator[None]:
        """Keep a service id on the stack for the duration of a resolution.

        Example:
            >>> with detector.track("mailer"):
            ...     with detector.track("transport"):
            ...         with detector.track("mailer"):  # Raises CircularDependencyError
            ...             pass
        """
        self.push(service_id)
        try:
            yield
        finally:
            self.pop()

    def push(self, service_id: str) -> None:
        """Enter the resolution of a service id.

        Raises:
            CircularDependencyError: If the id is already being resolved.
        """
        stack = self._get_stack()
        if service_id in stack:
            raise CircularDependencyError(stack[stack.index(service_id) :] + [service_id])
        stack.append(service_id)

    def pop(self) -> None:
        stack = self._get_stack()
        if stack:
            stack.pop()

    def depth(self) -> int:
        return len(self._get_stack())

    def clear(self) -> None:
        """Forget any resolution left on this thread's stack."""
        if hasattr(self._local, "stack"):
            self._local.stack.clear()
