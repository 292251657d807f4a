"""Tests for per-cell outcomes and how they render."""
import datetime as dt
import math
from enum import Enum, IntEnum

import pandas as pd

from tablesheet.columns import TableSheetColumn
from tablesheet.exceptions import AccessorInvocationError, FailedToGetTableValueError
from tablesheet.results import (
    Extracted,
    ExtractionFailed,
    Skipped,
    Unexpected,
    extract,
    is_null,
    render_cell,
)


class Color(Enum):
    RED = "r"
    GREEN = "g"


class Priority(IntEnum):
    LOW = 1
    HIGH = 2


def _column(getter=lambda e: e, property_type=object, name="value"):
    return TableSheetColumn(property_type, getter, name=name)


def _raise(exc):
    def getter(element):
        raise exc
    return getter


def test_extract_classifies_outcomes():
    assert extract(_column(), 5) == Extracted(5)

    failed = extract(_column(_raise(FailedToGetTableValueError("total", "no total"))), None)
    assert isinstance(failed, ExtractionFailed)
    assert failed.property == "total"

    assert isinstance(extract(_column(_raise(AccessorInvocationError("skip"))), None), Skipped)

    unexpected = extract(_column(lambda e: 1 / 0, name="ratio"), None)
    assert isinstance(unexpected, Unexpected)
    assert unexpected.property == "ratio"
    assert "ZeroDivisionError" in unexpected.detail


def test_null_values_render_empty():
    column = _column()
    for value in (None, math.nan, pd.NaT, pd.NA):
        assert render_cell(Extracted(value), column) == ("", None)


def test_is_null_ignores_containers():
    assert is_null([None]) is False
    assert is_null("") is False
    assert is_null(0) is False


def test_enum_members_render_by_name():
    assert render_cell(Extracted(Color.GREEN), _column(property_type=Color)) == ("GREEN", None)
    assert render_cell(Extracted(Priority.HIGH), _column(property_type=Priority)) == ("HIGH", None)
    # enum member in an untyped column
    assert render_cell(Extracted(Color.RED), _column()) == ("RED", None)


def test_raw_value_of_enum_column_renders_member_name():
    assert render_cell(Extracted(2), _column(property_type=Priority)) == ("HIGH", None)
    assert render_cell(Extracted("r"), _column(property_type=Color)) == ("RED", None)


def test_unstorable_values_are_stringified():
    assert render_cell(Extracted([1, 2]), _column()) == ("[1, 2]", None)
    assert render_cell(Extracted(3.5), _column()) == (3.5, None)


def test_failures_render_empty_with_comment_except_skipped():
    value, comment = render_cell(ExtractionFailed("total", "no total\nProperty: total"), _column())
    assert value == ""
    assert comment == "Error: no total\nProperty: total"

    value, comment = render_cell(Unexpected("ratio", "ZeroDivisionError: division by zero"), _column())
    assert value == ""
    assert comment == "Error: ZeroDivisionError: division by zero\nProperty: ratio"

    assert render_cell(Skipped("wrapped"), _column()) == ("", None)


def test_strings_lose_illegal_control_characters():
    assert render_cell(Extracted("a\x00b\x0bc\td"), _column(property_type=str)) == ("abc\td", None)
    _, comment = render_cell(Unexpected("v", "ValueError: bad \x07 input"), _column())
    assert "\x07" not in comment


def test_aware_datetimes_and_times_become_naive():
    utc = dt.timezone.utc
    value, _ = render_cell(Extracted(dt.datetime(2024, 5, 6, 7, 8, tzinfo=utc)), _column())
    assert value == dt.datetime(2024, 5, 6, 7, 8) and value.tzinfo is None
    value, _ = render_cell(Extracted(dt.time(7, 8, tzinfo=utc)), _column())
    assert value == dt.time(7, 8)
    value, _ = render_cell(Extracted(pd.Timestamp("2024-05-06 07:08", tz="Europe/Paris")), _column())
    assert value == dt.datetime(2024, 5, 6, 7, 8)
