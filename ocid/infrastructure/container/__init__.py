from .config import ContainerConfig, EntropyConfig, HashingConfig
from .main import Container, create_container

__all__ = [
    "Container",
    "create_container",
    "ContainerConfig",
    "HashingConfig",
    "EntropyConfig",
]
