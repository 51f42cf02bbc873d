"""
wirebox: Id-based service and parameter registry with constructor autowiring.

Public API exports for the wirebox package.
"""

# Application exports
from wirebox.application.container import Container

# Domain exports
from wirebox.domain.enums import DescriptorKind
from wirebox.domain.exceptions import (
    CircularDependencyError,
    ContainerError,
    DIException,
    InvalidArgumentError,
    NotFoundError,
)
from wirebox.domain.models import ContainerConfig

__version__ = "0.1.0"

__all__ = [
    # Container
    "Container",
    "ContainerConfig",
    # Enums
    "DescriptorKind",
    # Exceptions
    "DIException",
    "InvalidArgumentError",
    "NotFoundError",
    "ContainerError",
    "CircularDependencyError",
]
