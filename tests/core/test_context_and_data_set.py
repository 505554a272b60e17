from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from rulecheck.core.validation import (
    MappingDataSet,
    ObjectDataSet,
    SingleValueDataSet,
    ValidationContext,
    create_data_set,
)


class Signup(BaseModel):
    email: str
    terms: bool = False


class Plain:
    def __init__(self):
        self.name = "plain"


@dataclass(frozen=True, slots=True)
class SlottedForm:
    name: str


class Slotted:
    __slots__ = ("name",)

    def __init__(self):
        self.name = "slotted"


@pytest.mark.parametrize(
    "data,expected_type",
    [
        ({"a": 1}, MappingDataSet),
        (Signup(email="x@example.com"), ObjectDataSet),
        (Plain(), ObjectDataSet),
        (SlottedForm(name="bob"), ObjectDataSet),
        (Slotted(), ObjectDataSet),
        (5, SingleValueDataSet),
        ("text", SingleValueDataSet),
        ([1, 2], SingleValueDataSet),
        ((1, 2), SingleValueDataSet),
        (b"raw", SingleValueDataSet),
        (None, SingleValueDataSet),
    ],
)
def test_create_data_set_picks_shape(data, expected_type):
    assert isinstance(create_data_set(data), expected_type)


def test_create_data_set_passes_data_sets_through():
    data_set = MappingDataSet({})
    assert create_data_set(data_set) is data_set


def test_mapping_data_set():
    data_set = MappingDataSet({"a": 1, "n": None})
    assert data_set.get_attribute_value("a") == 1
    assert data_set.has_attribute("n") is True
    assert data_set.has_attribute("missing") is False
    assert data_set.get_attribute_value("missing") is None


def test_object_data_set_reads_pydantic_fields_only():
    data_set = ObjectDataSet(Signup(email="x@example.com"))
    assert data_set.get_attribute_value("email") == "x@example.com"
    assert data_set.get_attribute_value("terms") is False
    assert data_set.has_attribute("model_dump") is False


def test_object_data_set_reads_plain_attributes():
    data_set = ObjectDataSet(Plain())
    assert data_set.get_attribute_value("name") == "plain"
    assert data_set.has_attribute("other") is False
    assert data_set.get_attribute_value("other") is None


def test_single_value_data_set_has_no_attributes():
    data_set = SingleValueDataSet(5)
    assert data_set.data == 5
    assert data_set.has_attribute("anything") is False


def test_context_defaults():
    context = ValidationContext()
    assert context.attribute is None
    assert context.root is None
    assert context.parameters == {}


def test_attribute_scope_restores_previous_attribute():
    context = ValidationContext(MappingDataSet({"a": 1}), attribute="outer")

    with context.attribute_scope("inner") as scoped:
        assert scoped is context
        assert context.attribute == "inner"
        with context.attribute_scope("deepest"):
            assert context.attribute == "deepest"
        assert context.attribute == "inner"

    assert context.attribute == "outer"


def test_attribute_scope_restores_on_error():
    context = ValidationContext()
    with pytest.raises(RuntimeError):
        with context.attribute_scope("a"):
            raise RuntimeError("boom")
    assert context.attribute is None


def test_context_parameters_carry_cross_field_state():
    context = ValidationContext(parameters={"locale": "en"})
    context.set_parameter("seen", True)
    assert context.get_parameter("locale") == "en"
    assert context.get_parameter("seen") is True
    assert context.get_parameter("missing", "default") == "default"


@pytest.mark.parametrize("obj,expected", [(SlottedForm(name="bob"), "bob"), (Slotted(), "slotted")])
def test_object_data_set_reads_slotted_attributes(obj, expected):
    data_set = create_data_set(obj)
    assert data_set.has_attribute("name") is True
    assert data_set.get_attribute_value("name") == expected
    assert data_set.has_attribute("other") is False
