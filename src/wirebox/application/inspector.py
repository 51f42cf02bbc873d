"""Application layer - Class loading and constructor introspection."""

import importlib
import inspect
import logging
import types
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, get_type_hints

from wirebox.domain import ContainerError, ParameterSpec

logger = logging.getLogger(__name__)

# Classes from these modules are scalars or typing constructs, never services.
_NON_SERVICE_MODULES = frozenset({"builtins", "typing", "typing_extensions"})

_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def qualified_name(cls: type) -> str:
    """Return the ``module.QualName`` of a class.

    Example:
        >>> qualified_name(collections.OrderedDict)
        'collections.OrderedDict'
    """
    return f"{cls.__module__}.{cls.__qualname__}"


def normalize_class_path(path: str) -> str:
    """Turn ``"package.module:Class"`` into ``"package.module.Class"``."""
    return path.replace(":", ".")


def _import_candidates(path: str) -> List[Tuple[str, str]]:
    module_name, separator, attribute_path = path.partition(":")
    if separator:
        return [(module_name, attribute_path)]

    # No explicit separator: try the longest importable module prefix first
    parts = path.split(".")
    return [(".".join(parts[:i]), ".".join(parts[i:])) for i in range(len(parts) - 1, 0, -1)]


def load_class(path: str) -> Optional[type]:
    """Import the class named by a dotted path.

    Accepts ``"package.module.Class"``, ``"package.module.Outer.Inner"`` and
    ``"package.module:Class"``.

    Args:
        path: The dotted class path.

    Returns:
        The class, or None when the path does not name an existing class.

    Raises:
        ContainerError: If a module on the path exists but fails to import.
    """
    for module_name, attribute_path in _import_candidates(path):
        if not attribute_path or "" in module_name.split("."):
            continue
        try:
            target: Any = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            # Only a missing candidate module means "try a shorter prefix"
            if e.name and (module_name == e.name or module_name.startswith(e.name + ".")):
                continue
            raise ContainerError(f'Cannot import "{module_name}" for class path "{path}": {e}') from e
        except Exception as e:
            raise ContainerError(f'Cannot import "{module_name}" for class path "{path}": {e}') from e

        for attribute in attribute_path.split("."):
            target = getattr(target, attribute, None)
            if target is None:
                break

        if inspect.isclass(target):
            return target

    return None


def is_class_annotation(annotation: Any) -> bool:
    """Return True if an annotation names a class a service can be registered under.

    Builtin scalars (``str``, ``int``, ...), unions, ``Optional``, generic aliases
    and untyped parameters are not class annotations.
    """
    if not isinstance(annotation, type):
        return False
    if isinstance(annotation, types.GenericAlias):
        return False
    return annotation.__module__ not in _NON_SERVICE_MODULES


def is_instantiable(cls: type) -> bool:
    """Return False for abstract classes, protocols and enums."""
    if inspect.isabstract(cls):
        return False
    if getattr(cls, "_is_protocol", False):
        return False
    if issubclass(cls, Enum):
        return False
    return True


class ConstructorInspector:
    """Reads constructor signatures into ordered ParameterSpec lists.

    Uses Python's inspect module for the signature and ``typing.get_type_hints``
    to resolve string annotations. ``self``, ``*args`` and ``**kwargs`` are skipped.
    """

    def inspect(self, cls: type) -> List[ParameterSpec]:
        """Return the injectable constructor parameters of a class.

        Args:
            cls: The class to inspect.

        Returns:
            Parameters in declaration order. Empty when the class defines no constructor.

        Raises:
            ContainerError: If the constructor signature cannot be read.

        Example:
            >>> class Mailer:
            ...     def __init__(self, transport: Transport, retries: int = 3):
            ...         pass
            >>> [p.name for p in ConstructorInspector().inspect(Mailer)]
            ['transport', 'retries']
        """
        constructor = cls.__init__
        if constructor is object.__init__:
            return []

        try:
            signature = inspect.signature(constructor)
        except (TypeError, ValueError) as e:
            raise ContainerError(f'Cannot inspect constructor of "{qualified_name(cls)}": {e}') from e

        type_hints = self._type_hints(cls, constructor, signature)

        parameters = []
        # The first parameter is the instance itself
        for parameter in list(signature.parameters.values())[1:]:
            if parameter.kind in _SKIPPED_KINDS:
                continue

            annotation = type_hints.get(parameter.name, parameter.annotation)
            if annotation is inspect.Parameter.empty:
                annotation = None

            has_default = parameter.default is not inspect.Parameter.empty
            parameters.append(
                ParameterSpec(
                    name=parameter.name,
                    keyword_only=parameter.kind is inspect.Parameter.KEYWORD_ONLY,
                    annotation=annotation,
                    type_name=qualified_name(annotation) if is_class_annotation(annotation) else None,
                    has_default=has_default,
                    default=parameter.default if has_default else None,
                )
            )

        return parameters

    def _type_hints(self, cls: type, constructor: Any, signature: "inspect.Signature") -> Dict[str, Any]:
        try:
            return get_type_hints(constructor)
        except (NameError, TypeError) as e:
            logger.debug("Could not evaluate all type hints of %s: %s", qualified_name(cls), e)

        # Evaluate annotations one by one so only the unresolvable ones stay strings
        namespace = getattr(constructor, "__globals__", {})
        type_hints = {}
        for parameter in signature.parameters.values():
            annotation = parameter.annotation
            if not isinstance(annotation, str):
                continue
            try:
                type_hints[parameter.name] = eval(annotation, namespace)
            except Exception as e:
                logger.debug("Leaving %s.%s untyped: %s", qualified_name(cls), parameter.name, e)
        return type_hints
