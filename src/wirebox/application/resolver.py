import logging
from typing import Any, Dict, List, Optional

from wirebox.application.inspector import (
    ConstructorInspector,
    is_instantiable,
    load_class,
    qualified_name,
)
from wirebox.domain import (
    ContainerError,
    DescriptorKind,
    DIException,
    Entry,
    IContainer,
    IResolver,
    NotFoundError,
    ParameterSpec,
)

logger = logging.getLogger(__name__)


class AutowireResolver(IResolver):
    """Builds services by autowiring their constructor parameters.

    Class-typed parameters are looked up by type name among the registered
    services and resolved through the container. Any other parameter uses its
    declared default value.

    Attributes:
        _inspector: Component reading constructor signatures.
    """

    def __init__(self, inspector: Optional[ConstructorInspector] = None) -> None:
        self._inspector = inspector or ConstructorInspector()

    def resolve(self, entry: Entry, container: IContainer) -> Any:
        """Build the service described by a registry entry.

        Args:
            entry: The service entry. Instance entries are returned as-is.
            container: The container to resolve constructor dependencies from.

        Returns:
            The service instance.

        Raises:
            NotFoundError: If the class or a dependency's service does not exist.
            ContainerError: If the class or one of its parameters cannot be resolved.

        Example:
            >>> class Mailer:
            ...     def __init__(self, transport: Transport, retries: int = 3):
            ...         self.transport = transport
            ...         self.retries = retries
            >>>
            >>> container.set("transport", Transport)
            >>> container.set("mailer", Mailer)
            >>> mailer = resolver.resolve(entry_for_mailer, container)
        """
        if entry.kind == DescriptorKind.INSTANCE:
            return entry.value

        cls = self._load(entry)

        if not is_instantiable(cls):
            raise ContainerError(f'Service "{qualified_name(cls)}" is not instantiable.')

        parameters = self._inspector.inspect(cls)
        if not parameters:
            return self._instantiate(cls, [], {})

        args: List[Any] = []
        kwargs: Dict[str, Any] = {}
        for parameter in parameters:
            value = self._resolve_parameter(cls, parameter, container)
            if parameter.keyword_only:
                kwargs[parameter.name] = value
            else:
                args.append(value)

        return self._instantiate(cls, args, kwargs)

    def _load(self, entry: Entry) -> type:
        if isinstance(entry.value, str):
            cls = load_class(entry.value)
            if cls is None:
                raise NotFoundError(f'Service "{entry.value}" does not exist.', entry_id=entry.value)
            return cls
        return entry.value

    def _resolve_parameter(self, cls: type, parameter: ParameterSpec, container: IContainer) -> Any:
        if not parameter.is_class_typed:
            if not parameter.has_default:
                raise ContainerError(
                    f'Cannot resolve non-class dependency "{parameter.name}" of "{qualified_name(cls)}".'
                )
            return parameter.default

        ids = container.ids_for_type(parameter.type_name)
        if not ids:
            raise NotFoundError(
                f'No service of type "{parameter.type_name}" is registered '
                f'for parameter "{parameter.name}" of "{qualified_name(cls)}".',
                entry_id=parameter.type_name,
            )
        if len(ids) > 1:
            raise ContainerError(
                f'Cannot resolve dependency "{parameter.name}" of "{qualified_name(cls)}": '
                f'type "{parameter.type_name}" is registered under several ids ({", ".join(ids)}).'
            )

        logger.debug("Autowiring %s.%s with service %r", qualified_name(cls), parameter.name, ids[0])
        return container.get(ids[0])

    def _instantiate(self, cls: type, args: List[Any], kwargs: Dict[str, Any]) -> Any:
        try:
            return cls(*args, **kwargs)
        except DIException:
            raise
        except Exception as e:
            raise ContainerError(f'Failed to create instance of "{qualified_name(cls)}": {e}') from e
