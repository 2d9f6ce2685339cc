from typing import Optional

from injector import Injector, Module, provider, singleton

from ..application.services.content_id_service import ContentIdService
from .container import Container, ContainerConfig


class ContentIdModule(Module):

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._config = config or ContainerConfig()

    @singleton
    @provider
    def provide_container(self) -> Container:
        return Container(self._config)

    @singleton
    @provider
    def provide_content_id_service(
        self,
        container: Container,
    ) -> ContentIdService:
        return container.content_id_service


class AppInjector:

    _instance: "AppInjector | None" = None

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._module = ContentIdModule(config=config)
        self._injector = Injector([self._module])
        self._service: ContentIdService | None = None

    @classmethod
    def get_instance(
        cls,
        config: Optional[ContainerConfig] = None,
    ) -> "AppInjector":
        if cls._instance is None:
            cls._instance = cls(config=config)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def get(self, cls: type) -> object:
        return self._injector.get(cls)

    def get_service(self) -> ContentIdService:
        if self._service is None:
            self._service = self._injector.get(ContentIdService)
        return self._service


__all__ = ["AppInjector", "ContentIdModule"]
