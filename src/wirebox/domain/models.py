from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from wirebox.domain.enums import DescriptorKind

DEFAULT_CONTAINER_ID = "service_container"


class ContainerConfig(BaseModel):
    """Container configuration.

    Attributes:
        reserved_id: Id that can never be registered as a service.
        allow_instances: Accept already-constructed objects as service descriptors.
        detect_cycles: Fail fast with CircularDependencyError on dependency cycles.
    """

    model_config = ConfigDict(frozen=True)

    reserved_id: str = Field(
        default=DEFAULT_CONTAINER_ID,
        min_length=1,
        description="Protected designation of the service container.",
    )
    allow_instances: bool = Field(default=True, description="Whether instance descriptors are accepted.")
    detect_cycles: bool = Field(default=True, description="Whether circular dependencies are detected.")


class Entry(BaseModel):
    """Value object representing a registered service or parameter.

    Attributes:
        id: Unique id within its store.
        value: Service descriptor or parameter value.
        locked: Locked entries can never be replaced or removed.
        kind: Descriptor kind for service entries, None for parameters.
        type_name: Qualified type name the service is indexed under.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str = Field(..., min_length=1, description="The id of the entry.")
    value: Any = Field(..., description="The registered descriptor or value.")
    locked: bool = Field(default=False, description="Whether the entry is locked.")
    kind: Optional[DescriptorKind] = Field(default=None, description="Descriptor kind for services.")
    type_name: Optional[str] = Field(default=None, description="Qualified type name for services.")


class ParameterSpec(BaseModel):
    """A single formal constructor parameter.

    Attributes:
        name: Parameter name.
        keyword_only: Whether the argument must be passed by keyword.
        annotation: The declared type, or None when untyped.
        type_name: Qualified name of the declared class, None when not class-typed.
        has_default: Whether a default value is declared.
        default: The declared default value.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    keyword_only: bool = False
    annotation: Any = None
    type_name: Optional[str] = None
    has_default: bool = False
    default: Any = None

    @property
    def is_class_typed(self) -> bool:
        return self.type_name is not None
