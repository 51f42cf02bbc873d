"""Unit tests for domain models."""

import pytest
from pydantic import ValidationError

from wirebox.domain.enums import DescriptorKind
from wirebox.domain.models import DEFAULT_CONTAINER_ID, ContainerConfig, Entry, ParameterSpec


class TestContainerConfig:
    """Test cases for the ContainerConfig model."""

    def test_defaults(self):
        """Test the default configuration."""
        config = ContainerConfig()

        assert config.reserved_id == DEFAULT_CONTAINER_ID == "service_container"
        assert config.allow_instances is True
        assert config.detect_cycles is True

    def test_is_frozen(self):
        """Test that ContainerConfig is immutable."""
        config = ContainerConfig()

        with pytest.raises(ValidationError):
            config.detect_cycles = False

    def test_empty_reserved_id_rejected(self):
        """Test that the reserved id cannot be empty."""
        with pytest.raises(ValidationError):
            ContainerConfig(reserved_id="")


class TestEntry:
    """Test cases for the Entry model."""

    def test_parameter_entry(self):
        """Test creating a parameter entry."""
        entry = Entry(id="page_size", value=50)

        assert entry.id == "page_size"
        assert entry.value == 50
        assert entry.locked is False
        assert entry.kind is None
        assert entry.type_name is None

    def test_service_entry(self):
        """Test creating a service entry."""

        class Mailer:
            pass

        entry = Entry(id="mailer", value=Mailer, locked=True, kind=DescriptorKind.CLASS, type_name="x.Mailer")

        assert entry.value is Mailer
        assert entry.locked is True
        assert entry.kind == DescriptorKind.CLASS

    def test_instance_value_is_kept_as_is(self):
        """Test that arbitrary objects are stored without copying."""
        settings = {"debug": True}

        entry = Entry(id="settings", value=settings)

        assert entry.value is settings

    def test_empty_id_rejected(self):
        """Test that an empty id fails validation."""
        with pytest.raises(ValidationError):
            Entry(id="", value=1)

    def test_is_frozen(self):
        """Test that Entry is immutable."""
        entry = Entry(id="page_size", value=50)

        with pytest.raises(ValidationError):
            entry.locked = True


class TestParameterSpec:
    """Test cases for the ParameterSpec model."""

    def test_class_typed(self):
        """Test that a parameter with a type name is class-typed."""
        parameter = ParameterSpec(name="transport", type_name="app.Transport")

        assert parameter.is_class_typed is True
        assert parameter.has_default is False

    def test_untyped(self):
        """Test that a parameter without a type name is not class-typed."""
        parameter = ParameterSpec(name="retries", annotation=int, has_default=True, default=3)

        assert parameter.is_class_typed is False
        assert parameter.default == 3
