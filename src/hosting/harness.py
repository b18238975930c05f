from __future__ import annotations
import logging
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any, Callable

from fastapi import FastAPI
from fastapi.testclient import TestClient
from typing_extensions import Self

from config.loader import ConfigLoader
from config.settings import HarnessSettings


EntryPoint = FastAPI | Callable[[], FastAPI]


@dataclass
class HarnessContext:
    """
    What a test receives from the harness:
    • client: request-capable client bound to the in-process application
    • server: the application instance being served
    • configuration: configuration resolved for this run
    • environment: hosting environment name
    """
    client: TestClient
    server: FastAPI
    configuration: dict[str, Any] = field(default_factory=dict)
    environment: str = ""


class ApplicationHarness:
    """
    Boots an application under test in memory and hands back a client, the
    server handle and the resolved configuration.

    The entry point is either a FastAPI instance or a zero-argument factory
    returning one. Settings are passed explicitly; override configure_services
    (or pass dependency_overrides) to swap application dependencies for test
    doubles before the client is created.
    """

    def __init__(
        self,
        entry_point: EntryPoint,
        settings: HarnessSettings | None = None,
        loader: ConfigLoader | None = None,
        dependency_overrides: dict[Callable[..., Any], Callable[..., Any]] | None = None,
    ) -> None:
        self._entry_point = entry_point
        self.settings = settings or HarnessSettings()
        self._loader = loader or ConfigLoader()
        self._dependency_overrides = dict(dependency_overrides or {})
        self._context: HarnessContext | None = None
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")

    @property
    def context(self) -> HarnessContext:
        if self._context is None:
            raise RuntimeError(f"{self.__class__.__name__} has not been started; call act() first")
        return self._context

    def _build_application(self) -> FastAPI:
        if isinstance(self._entry_point, FastAPI):
            return self._entry_point

        app = self._entry_point()
        if not isinstance(app, FastAPI):
            raise TypeError(
                f"Entry point factory must return a FastAPI application, got {type(app).__name__}"
            )
        return app

    def configure_application(self, app: FastAPI, configuration: dict[str, Any]) -> None:
        app.state.environment = self.settings.environment
        app.state.configuration = configuration

    def configure_services(self, app: FastAPI) -> None:
        app.dependency_overrides.update(self._dependency_overrides)

    def create_client(self, app: FastAPI) -> TestClient:
        return TestClient(app, follow_redirects=self.settings.follow_redirects)

    def act(self) -> HarnessContext:
        if self._context is not None:
            return self._context

        configuration = self._loader.load(self.settings)
        app = self._build_application()

        self.configure_application(app, configuration)
        self.configure_services(app)

        self._context = HarnessContext(
            client=self.create_client(app),
            server=app,
            configuration=configuration,
            environment=self.settings.environment,
        )
        self._logger.info(f"Hosting {app.title!r} in environment {self.settings.environment!r}")

        return self._context

    def close(self) -> None:
        if self._context is None:
            return

        self._context.client.close()
        self._context = None
        self._logger.info("Harness closed")

    def __enter__(self) -> Self:
        self.act()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
