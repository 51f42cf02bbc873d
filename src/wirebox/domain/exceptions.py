from typing import List, Optional


class DIException(Exception):
    """Base exception for DI-related errors."""


class InvalidArgumentError(DIException, ValueError):
    """Raised for an illegal registry mutation.

    This occurs when:
    - Registering a service under the reserved id.
    - Replacing or unsetting a locked entry.
    - Unsetting an entry that was never set.
    - Using an empty id.

    Attributes:
        entry_id: The id the mutation was attempted on.
    """

    def __init__(self, message: str, entry_id: Optional[str] = None) -> None:
        self.entry_id = entry_id
        super().__init__(message)


class NotFoundError(DIException, LookupError):
    """Raised when a service id, parameter id or descriptor class does not exist.

    Attributes:
        entry_id: The id (or class path) that could not be found.
    """

    def __init__(self, message: str, entry_id: Optional[str] = None) -> None:
        self.entry_id = entry_id
        super().__init__(message)


class ContainerError(DIException):
    """Raised when a registered class exists but cannot be constructed.

    This occurs when:
    - The class is abstract, a protocol or an enum.
    - A non-class constructor parameter has no default value.
    - A dependency type is registered under more than one id.
    - The constructor itself raised.
    """


class CircularDependencyError(ContainerError):
    """Raised when a circular dependency is detected.

    Attributes:
        dependency_chain: Service ids involved in the cycle, first id repeated last.
    """

    def __init__(self, dependency_chain: List[str]) -> None:
        self.dependency_chain = dependency_chain
        message = f"Circular dependency detected: {' -> '.join(dependency_chain)}"
        super().__init__(message)
