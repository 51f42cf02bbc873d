"""
FastAPI integration module.

Provides helpers for getting container services and parameters in FastAPI endpoints.
"""

from .integration import (
    create_app_dependency,
    create_fastapi_dependency,
    create_parameter_dependency,
    install_container,
)

__all__ = [
    "create_fastapi_dependency",
    "create_parameter_dependency",
    "create_app_dependency",
    "install_container",
]
