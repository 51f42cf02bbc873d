"""
Application layer - Registry and resolution.

This layer contains the container and the components it orchestrates.
It depends only on the Domain layer.
"""

from .circular_detector import CircularDependencyDetector
from .container import Container
from .inspector import ConstructorInspector, load_class, qualified_name
from .resolver import AutowireResolver
from .store import EntryStore, TypeIndex

__all__ = [
    "Container",
    "AutowireResolver",
    "ConstructorInspector",
    "CircularDependencyDetector",
    "EntryStore",
    "TypeIndex",
    "load_class",
    "qualified_name",
]
