from .base import JsonSerializable

__all__ = ["JsonSerializable"]
