from . import ordered_base64

__all__ = ["ordered_base64"]
