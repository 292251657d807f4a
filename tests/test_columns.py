"""Tests for column descriptors: type resolution, default labels and formats, accessors."""
import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pytest

from tablesheet.columns import TableSheetColumn, default_format, path_getter, resolve_path_type
from tablesheet.excel import formats
from tablesheet.exceptions import FailedToGetTableValueError


class Status(Enum):
    OPEN = 1
    CLOSED = 2


@dataclass
class Customer:
    name: str
    since: Optional[dt.date] = None


@dataclass
class Order:
    number: int
    customer: Customer
    placed_at: dt.datetime
    lead_time: dt.timedelta
    status: Status = Status.OPEN
    notes: Optional[str] = None


def order_total(order: Order) -> float:
    return 12.5


def test_default_format_policy():
    assert default_format(dt.datetime) == formats.DATE_TIME
    assert default_format(dt.timedelta) == formats.DURATION
    assert default_format(dt.date) == formats.DATE
    assert default_format(dt.time) == formats.TIME
    assert default_format(str) == ""
    assert default_format(int) == ""


def test_path_type_follows_type_hints():
    assert resolve_path_type(Order, "number") is int
    assert resolve_path_type(Order, "customer.name") is str
    assert resolve_path_type(Order, "customer.since") is dt.date
    assert resolve_path_type(Order, "notes") is str
    assert resolve_path_type(Order, "missing") is object
    assert resolve_path_type(None, "number") is object


def test_create_from_path_uses_type_name_as_label():
    column = TableSheetColumn.create("placed_at", element_type=Order)
    assert column.property_type is dt.datetime
    assert column.label == "datetime"
    assert column.format == formats.DATE_TIME
    assert column.name == "placed_at"


def test_create_duration_column_gets_duration_format():
    column = TableSheetColumn.create("lead_time", element_type=Order)
    assert column.format == formats.DURATION


def test_explicit_label_and_format_win():
    column = TableSheetColumn.create("placed_at", "Placed", formats.DATE, element_type=Order)
    assert column.label == "Placed"
    assert column.format == formats.DATE


def test_create_from_callable_uses_return_annotation():
    column = TableSheetColumn.create(order_total)
    assert column.property_type is float
    assert column.label == "float"
    assert column.name == "order_total"


def test_lambda_without_annotation_is_object():
    column = TableSheetColumn.create(lambda o: o.number)
    assert column.property_type is object
    assert column.label == "object"
    assert column.name == "object"


def test_explicit_property_type_overrides_resolution():
    column = TableSheetColumn.create(lambda o: o.status.value, "Status", property_type=Status)
    assert column.property_type is Status


def test_each_column_gets_its_own_guid():
    a = TableSheetColumn.create("number", element_type=Order)
    b = TableSheetColumn.create("number", element_type=Order)
    assert a.guid != b.guid


def test_path_getter_reads_attributes_and_mappings():
    order = Order(7, Customer("Ada"), dt.datetime(2024, 1, 2), dt.timedelta(hours=3))
    assert path_getter("customer.name")(order) == "Ada"
    assert path_getter("customer.name")({"customer": {"name": "Grace"}}) == "Grace"


def test_path_getter_wraps_lookup_failures():
    with pytest.raises(FailedToGetTableValueError) as info:
        path_getter("customer.email")({"customer": {"name": "Grace"}})
    assert info.value.property == "customer.email"
    assert "Property: customer.email" in str(info.value)
    assert isinstance(info.value.__cause__, KeyError)


def test_rejects_non_callable_key():
    with pytest.raises(TypeError):
        TableSheetColumn.create(42)
