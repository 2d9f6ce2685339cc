from .domain.errors import DecodeError, InvalidCharacterError, LengthMismatchError
from .domain.value_objects.content_id import (
    CONTENT_ID_SIZE,
    CONTENT_ID_TEXT_LENGTH,
    ContentId,
)
from .infrastructure.container import Container, ContainerConfig, create_container

__all__ = [
    "ContentId",
    "CONTENT_ID_SIZE",
    "CONTENT_ID_TEXT_LENGTH",
    "DecodeError",
    "LengthMismatchError",
    "InvalidCharacterError",
    "Container",
    "ContainerConfig",
    "create_container",
]

__version__ = "0.1.0"
