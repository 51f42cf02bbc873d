from abc import ABC, abstractmethod
from typing import Any, List, Optional

from wirebox.domain.models import Entry


class IContainer(ABC):
    """Abstract interface for dependency injection container operations."""

    @abstractmethod
    def set(self, id: str, value: Optional[object], lock: bool = False) -> None:
        """Register, replace or (with ``None``) unset a service.

        Args:
            id: The service id.
            value: A class, a dotted class path, an instance, or None to unset.
            lock: Whether the entry is locked against later changes.
        """

    @abstractmethod
    def set_parameter(self, id: str, value: Any, lock: bool = False) -> None:
        """Register, replace or (with ``None``) unset a parameter.

        Args:
            id: The parameter id.
            value: Any value, or None to unset.
            lock: Whether the entry is locked against later changes.
        """

    @abstractmethod
    def get(self, id: str) -> Any:
        """Return the service registered under the given id.

        Args:
            id: The service id to resolve.
        """

    @abstractmethod
    def get_parameter(self, id: str) -> Any:
        """Return the parameter registered under the given id.

        Args:
            id: The parameter id.
        """

    @abstractmethod
    def has(self, id: str) -> bool:
        """Return True if a service is registered under the given id."""

    @abstractmethod
    def has_parameter(self, id: str) -> bool:
        """Return True if a parameter is registered under the given id."""

    @abstractmethod
    def ids_for_type(self, type_name: str) -> List[str]:
        """Return the service ids registered under a qualified type name.

        Args:
            type_name: Qualified type name, e.g. ``"package.module.ClassName"``.
        """


class IResolver(ABC):
    """Abstract interface for service resolution."""

    @abstractmethod
    def resolve(self, entry: Entry, container: IContainer) -> Any:
        """Build the service described by a registry entry.

        Args:
            entry: The service entry to resolve.
            container: The container used to resolve constructor dependencies.

        Returns:
            The service instance.

        Raises:
            NotFoundError: If the class or a dependency is not registered.
            ContainerError: If the class cannot be constructed.
        """
