"""
Domain layer - Core models, errors and contracts.

This layer contains the fundamental rules and models of the service registry.
It has no dependencies on other layers.
"""

from .enums import DescriptorKind
from .exceptions import (
    CircularDependencyError,
    ContainerError,
    DIException,
    InvalidArgumentError,
    NotFoundError,
)
from .interfaces import IContainer, IResolver
from .models import DEFAULT_CONTAINER_ID, ContainerConfig, Entry, ParameterSpec

__all__ = [
    # Enums
    "DescriptorKind",
    # Exceptions
    "DIException",
    "InvalidArgumentError",
    "NotFoundError",
    "ContainerError",
    "CircularDependencyError",
    # Interfaces
    "IContainer",
    "IResolver",
    # Models
    "DEFAULT_CONTAINER_ID",
    "ContainerConfig",
    "Entry",
    "ParameterSpec",
]
