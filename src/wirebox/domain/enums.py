from enum import Enum


class DescriptorKind(str, Enum):
    """Defines what a service entry was registered with.

    Attributes:
        CLASS: A class (or dotted path to one) instantiated on every ``get``.
        INSTANCE: An already-constructed object returned as-is.
    """

    CLASS = "class"
    INSTANCE = "instance"

    def __str__(self) -> str:
        return self.value
