"""Data sets: uniform attribute access over the value being validated.

A data set wraps the root input of a validation run. Rules attached to a named
attribute read that attribute through the data set; rules attached to the
whole value read ``data``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from pydantic import BaseModel

from .formatter import is_composite

_SEQUENCE_TYPES = (list, tuple, set, frozenset, bytes, bytearray)


class DataSet(ABC):
    """Read-only view over the root data of a validation run."""

    @property
    @abstractmethod
    def data(self) -> Any:
        """The raw value that was passed to the validator."""

    @abstractmethod
    def has_attribute(self, attribute: str) -> bool: ...

    @abstractmethod
    def get_attribute_value(self, attribute: str) -> Any:
        """Attribute value, or None when the attribute is missing."""


class SingleValueDataSet(DataSet):
    """A bare scalar (or any value without addressable attributes)."""

    __slots__ = ("_value",)

    def __init__(self, value: Any):
        self._value = value

    @property
    def data(self) -> Any: return self._value

    def has_attribute(self, attribute: str) -> bool: return False

    def get_attribute_value(self, attribute: str) -> Any: return None


class MappingDataSet(DataSet):
    """Dictionaries and other mappings; attributes are keys."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]):
        self._data = data

    @property
    def data(self) -> Mapping[str, Any]: return self._data

    def has_attribute(self, attribute: str) -> bool: return attribute in self._data

    def get_attribute_value(self, attribute: str) -> Any: return self._data.get(attribute)


class ObjectDataSet(DataSet):
    """Plain objects and pydantic models; attributes are object attributes.

    Pydantic models are read through ``model_dump()`` so only declared fields
    (and not methods or private attributes) are addressable.
    """

    __slots__ = ("_object", "_fields")

    def __init__(self, obj: Any):
        self._object = obj
        self._fields: dict[str, Any] | None = obj.model_dump() if isinstance(obj, BaseModel) else None

    @property
    def data(self) -> Any: return self._object

    def has_attribute(self, attribute: str) -> bool:
        if self._fields is not None: return attribute in self._fields
        return hasattr(self._object, attribute)

    def get_attribute_value(self, attribute: str) -> Any:
        if self._fields is not None: return self._fields.get(attribute)
        return getattr(self._object, attribute, None)


def create_data_set(data: Any) -> DataSet:
    """Pick the data set matching the shape of ``data``.

    Scalars and sequences are single values; any other object (pydantic
    models, plain and slotted classes, dataclasses) exposes its attributes.
    """
    if isinstance(data, DataSet): return data
    if isinstance(data, Mapping): return MappingDataSet(data)
    if not is_composite(data) or isinstance(data, _SEQUENCE_TYPES): return SingleValueDataSet(data)
    return ObjectDataSet(data)
