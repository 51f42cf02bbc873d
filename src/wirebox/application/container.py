import inspect
import logging
import threading
from typing import Any, Dict, List, Optional, Tuple

from wirebox.application.circular_detector import CircularDependencyDetector
from wirebox.application.inspector import load_class, normalize_class_path, qualified_name
from wirebox.application.resolver import AutowireResolver
from wirebox.application.store import EntryStore, TypeIndex
from wirebox.domain import (
    ContainerConfig,
    ContainerError,
    DescriptorKind,
    Entry,
    IContainer,
    InvalidArgumentError,
    IResolver,
    NotFoundError,
)

logger = logging.getLogger(__name__)


class Container(IContainer):
    """Main dependency injection container.

    Holds two separate registries, services and parameters, each entry carrying
    a lock flag. Services are built on demand by autowiring their constructors.

    Attributes:
        _config: Container configuration.
        _services: Store of service entries.
        _parameters: Store of parameter entries.
        _type_index: Type name to service ids index used for autowiring.
        _resolver: Component responsible for building services.
        _circular_detector: Component detecting circular dependencies.
        _lock: Guards both stores and the type index.
    """

    def __init__(self, config: Optional[ContainerConfig] = None, resolver: Optional[IResolver] = None) -> None:
        self._config = config or ContainerConfig()
        self._services = EntryStore()
        self._parameters = EntryStore()
        self._type_index = TypeIndex()
        self._resolver: IResolver = resolver or AutowireResolver()
        self._circular_detector = CircularDependencyDetector()
        self._lock = threading.RLock()

    @property
    def config(self) -> ContainerConfig:
        return self._config

    def set(self, id: str, value: Optional[object], lock: bool = False) -> None:
        """Register, replace or unset a service.

        Args:
            id: The service id.
            value: A class, a dotted class path, an already-constructed instance,
                   or None to unset an existing service.
            lock: Lock the entry so it can never be replaced or unset.

        Raises:
            InvalidArgumentError: If the id is reserved or empty, the existing entry
                                  is locked, or None is given for an undefined service.

        Example:
            >>> container.set("mailer", Mailer)
            >>> container.set("transport", "myapp.mail.SmtpTransport", lock=True)
            >>> container.set("mailer", None)  # unset
        """
        if id == self._config.reserved_id:
            raise InvalidArgumentError(
                f'You cannot set service "{id}" because it is a protected name.',
                entry_id=id,
            )
        self._check_id(id, "service")

        with self._lock:
            existing = self._services.get(id)
            if existing is not None:
                if existing.locked:
                    raise InvalidArgumentError(
                        f'The service "{id}" is locked, you cannot replace or unset it.',
                        entry_id=id,
                    )
                if value is None:
                    self._remove_service(id)
                    return
                self._add_service(self._build_service_entry(id, value, lock))
                return

            if value is None:
                raise InvalidArgumentError(f'You cannot unset an undefined service "{id}".', entry_id=id)

            self._add_service(self._build_service_entry(id, value, lock))

    def set_parameter(self, id: str, value: Any, lock: bool = False) -> None:
        """Register, replace or unset a parameter.

        Same rules as ``set`` without the reserved name.

        Raises:
            InvalidArgumentError: If the id is empty, the existing entry is locked,
                                  or None is given for an undefined parameter.
        """
        self._check_id(id, "parameter")

        with self._lock:
            if self._parameters.has(id):
                if self._parameters.is_locked(id):
                    raise InvalidArgumentError(
                        f'The parameter "{id}" is locked, you cannot replace or unset it.',
                        entry_id=id,
                    )
                if value is None:
                    self._parameters.remove(id)
                    logger.debug("Removed parameter %r", id)
                    return
            elif value is None:
                raise InvalidArgumentError(f'You cannot unset an undefined parameter "{id}".', entry_id=id)

            self._parameters.put(Entry(id=id, value=value, locked=lock))
            logger.debug("Set parameter %r (locked=%s)", id, lock)

    def get(self, id: str) -> Any:
        """Return the service registered under the given id.

        Instance services are returned as registered. Class services are built
        anew on every call, their constructor dependencies autowired.

        Raises:
            NotFoundError: If the id, its class or a dependency's service does not exist.
            ContainerError: If the class or one of its parameters cannot be resolved.
            CircularDependencyError: If the service depends on itself, directly or not.

        Example:
            >>> container.set("transport", SmtpTransport)
            >>> container.set("mailer", Mailer)  # Mailer(transport: SmtpTransport)
            >>> mailer = container.get("mailer")
        """
        with self._lock:
            entry = self._services.get(id) if self.has(id) else None
            if entry is None:
                raise NotFoundError(f'Service "{id}" not found.', entry_id=id)
            return self._resolve(entry)

    def get_parameter(self, id: str) -> Any:
        """Return the parameter registered under the given id.

        Raises:
            NotFoundError: If no parameter is registered under the id.
        """
        with self._lock:
            if not self.has_parameter(id):
                raise NotFoundError(f'Parameter "{id}" not found.', entry_id=id)
            return self._parameters.get(id).value

    def has(self, id: str) -> bool:
        return isinstance(id, str) and self._services.has(id)

    def has_parameter(self, id: str) -> bool:
        return isinstance(id, str) and self._parameters.has(id)

    def is_locked(self, id: str) -> bool:
        """Return True if the service exists and is locked. Never raises."""
        return isinstance(id, str) and self._services.is_locked(id)

    def is_locked_parameter(self, id: str) -> bool:
        """Return True if the parameter exists and is locked. Never raises."""
        return isinstance(id, str) and self._parameters.is_locked(id)

    def service_ids(self) -> List[str]:
        with self._lock:
            return self._services.ids()

    def parameter_ids(self) -> List[str]:
        with self._lock:
            return self._parameters.ids()

    def ids_for_type(self, type_name: str) -> List[str]:
        with self._lock:
            return self._type_index.ids(type_name)

    def get_registry_copy(self) -> Tuple[Dict[str, Entry], Dict[str, Entry]]:
        """Get a copy of the service and parameter entries.

        Entries are immutable, so the copies can be loaded into another container.

        Returns:
            Tuple of (services, parameters) dictionaries.
        """
        with self._lock:
            return self._services.copy(), self._parameters.copy()

    def _load_registry(self, services: Dict[str, Entry], parameters: Dict[str, Entry]) -> None:
        """Replace both stores wholesale, bypassing lock checks, and rebuild the type index."""
        with self._lock:
            self._services = EntryStore(services)
            self._parameters = EntryStore(parameters)
            self._type_index.clear()
            for entry in self._services.copy().values():
                self._type_index.add(entry.type_name, entry.id)

    def _resolve(self, entry: Entry) -> Any:
        if not self._config.detect_cycles:
            return self._resolver.resolve(entry, self)

        with self._circular_detector.track(entry.id):
            logger.debug("Resolving service %r (depth %d)", entry.id, self._circular_detector.depth())
            return self._resolver.resolve(entry, self)

    def _build_service_entry(self, id: str, value: object, lock: bool, allow_instances: Optional[bool] = None) -> Entry:
        if isinstance(value, str):
            return Entry(
                id=id,
                value=value,
                locked=lock,
                kind=DescriptorKind.CLASS,
                type_name=self._class_path_type_name(value),
            )

        if inspect.isclass(value):
            return Entry(id=id, value=value, locked=lock, kind=DescriptorKind.CLASS, type_name=qualified_name(value))

        if allow_instances is None:
            allow_instances = self._config.allow_instances
        if not allow_instances:
            raise InvalidArgumentError(
                f'Service "{id}" must be a class or a class path, got an instance of '
                f'"{qualified_name(type(value))}".',
                entry_id=id,
            )

        return Entry(
            id=id,
            value=value,
            locked=lock,
            kind=DescriptorKind.INSTANCE,
            type_name=qualified_name(type(value)),
        )

    @staticmethod
    def _class_path_type_name(path: str) -> str:
        """Index a class path under the class it names, so re-exported paths match annotations.

        Paths that cannot be imported yet keep their normalized spelling; the error
        surfaces on ``get``.
        """
        try:
            cls = load_class(path)
        except ContainerError as e:
            logger.debug("Deferring import of class path %r: %s", path, e)
            cls = None
        return qualified_name(cls) if cls is not None else normalize_class_path(path)

    def _add_service(self, entry: Entry) -> None:
        previous = self._services.put(entry)
        if previous is not None:
            self._type_index.remove(previous.type_name, previous.id)
        self._type_index.add(entry.type_name, entry.id)
        logger.debug("Set service %r as %s %s (locked=%s)", entry.id, entry.kind, entry.type_name, entry.locked)

    def _remove_service(self, id: str) -> None:
        entry = self._services.remove(id)
        self._type_index.remove(entry.type_name, entry.id)
        logger.debug("Removed service %r", id)

    @staticmethod
    def _check_id(id: str, store: str) -> None:
        if not isinstance(id, str) or not id:
            raise InvalidArgumentError(f"The {store} id must be a non-empty string, got {id!r}.", entry_id=None)
