# mzqclib/core/base.py
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Type, TypeVar

T = TypeVar("T", bound="JsonSerializable")


class JsonSerializable(ABC):
    """Abstract base class for entities with a JSON mapping."""

    @abstractmethod
    def to_json(self) -> Dict[str, Any]:
        """
        Return the JSON-object representation of this entity.

        Required keys are always present. Optional keys are only present
        when they carry a non-empty value.
        """
        pass

    @classmethod
    @abstractmethod
    def from_json(cls: Type[T], data: Any) -> T:
        """
        Build an entity from a parsed JSON value.

        Missing or mistyped keys fall back to their defaults; this never
        raises.
        """
        pass


def as_object(data: Any) -> Dict[str, Any]:
    """Return data if it is a JSON object, otherwise an empty one."""
    return data if isinstance(data, dict) else {}


def get_str(data: Dict[str, Any], key: str, default: str = "") -> str:
    """Read a string field, falling back to default if missing or mistyped."""
    value = data.get(key, default)
    return value if isinstance(value, str) else default


def get_list(
    data: Dict[str, Any], key: str, item_factory: Callable[[Any], Any]
) -> List[Any]:
    """Map item_factory over a JSON array field; non-arrays yield []."""
    items = data.get(key)
    if not isinstance(items, list):
        return []
    return [item_factory(item) for item in items]


def put_if_set(target: Dict[str, Any], key: str, value: str) -> None:
    """Add key to target only if value is a non-empty string."""
    if value:
        target[key] = value
