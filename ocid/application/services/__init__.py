from .content_id_service import CapabilityUnavailableError, ContentIdService

__all__ = [
    "ContentIdService",
    "CapabilityUnavailableError",
]
