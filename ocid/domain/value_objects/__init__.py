from .content_id import CONTENT_ID_SIZE, CONTENT_ID_TEXT_LENGTH, ContentId

__all__ = [
    "ContentId",
    "CONTENT_ID_SIZE",
    "CONTENT_ID_TEXT_LENGTH",
]
