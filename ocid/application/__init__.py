from .services import CapabilityUnavailableError, ContentIdService

__all__ = [
    "ContentIdService",
    "CapabilityUnavailableError",
]
