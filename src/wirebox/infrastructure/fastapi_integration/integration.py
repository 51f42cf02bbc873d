from typing import Any, Callable

from fastapi import FastAPI, Request

from wirebox.domain import IContainer


def create_fastapi_dependency(container: IContainer, service_id: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that gets a service from the container.

    Args:
        container: The container to get the service from.
        service_id: The id of the service.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> container = Container()
        >>> container.set("user_repository", UserRepository)
        >>>
        >>> get_user_repo = create_fastapi_dependency(container, "user_repository")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_user_repo)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Get the service from the container."""
        return container.get(service_id)

    return dependency


def create_parameter_dependency(container: IContainer, parameter_id: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that returns a container parameter.

    Example:
        >>> get_page_size = create_parameter_dependency(container, "page_size")
        >>>
        >>> @app.get("/items")
        >>> def list_items(page_size: int = Depends(get_page_size)):
        ...     ...
    """

    def dependency() -> Any:
        """Get the parameter from the container."""
        return container.get_parameter(parameter_id)

    return dependency


def install_container(app: FastAPI, container: IContainer) -> None:
    """Attach a container to the application state.

    Dependencies created with ``create_app_dependency`` resolve from it.

    Example:
        >>> app = FastAPI()
        >>> install_container(app, container)
    """
    app.state.di_container = container


def create_app_dependency(service_id: str) -> Callable[[Request], Any]:
    """Create a FastAPI dependency that gets a service from the app's installed container.

    Requires ``install_container`` to have been called on the application.

    Args:
        service_id: The id of the service.

    Returns:
        A callable that resolves from ``request.app.state.di_container``.

    Example:
        >>> install_container(app, container)
        >>> get_mailer = create_app_dependency("mailer")
        >>>
        >>> @app.post("/welcome")
        >>> def welcome(mailer: Mailer = Depends(get_mailer)):
        ...     return mailer.send()
    """

    def app_dependency(request: Request) -> Any:
        """Get the service from the application's container."""
        container = getattr(request.app.state, "di_container", None)
        if container is None:
            raise RuntimeError("Application does not have a DI container. Did you forget to call install_container?")
        return container.get(service_id)

    return app_dependency
