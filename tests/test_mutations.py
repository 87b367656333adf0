"""Tests for single-field updates on parsed rows."""

import pytest

from data_model import InvalidValueError, PluField, RecordReferenceError
from tms_writer import mutate_field, update_field
from validator import ErrorCode


class TestUpdateField:

    def test_keeps_field_count(self, doc):
        row = doc.section("PLU").rows[0]
        before = row.field_count
        update_field(row, PluField.NAME, "Carrot")
        assert row.field_count == before
        assert row.fields[PluField.NAME] == "Carrot"
        assert row.raw_fields[PluField.NAME] == b"Carrot"
        assert row.dirty

    def test_unicode_value_is_utf8_encoded(self, doc):
        row = doc.section("PLU").rows[1]
        update_field(row, PluField.NAME, "ලීක්ස්")
        assert row.raw_fields[PluField.NAME] == "ලීක්ස්".encode("utf-8")

    def test_dirty_row_serializes_from_fields(self, doc):
        row = doc.section("DPT").rows[0]
        update_field(row, 2, "Veg")
        assert row.to_bytes() == b"DPT\t1\tVeg\t"

    def test_index_out_of_range(self, doc):
        row = doc.section("DPT").rows[0]
        with pytest.raises(RecordReferenceError):
            update_field(row, 4, "x")
        with pytest.raises(RecordReferenceError):
            update_field(row, -1, "x")
        assert not row.dirty

    @pytest.mark.parametrize("value", ["a\tb", "a\rb", "a\nb"])
    def test_delimiters_rejected(self, doc, value):
        row = doc.section("DPT").rows[0]
        with pytest.raises(InvalidValueError) as exc_info:
            update_field(row, 2, value)
        assert exc_info.value.report.errors[0].code is ErrorCode.DELIMITER_IN_VALUE
        assert row.fields[2] == "Dept 1"
        assert not row.dirty

    def test_empty_value_allowed(self, doc):
        row = doc.section("DPT").rows[0]
        update_field(row, 2, "")
        assert row.to_bytes() == b"DPT\t1\t\t"


class TestMutateField:

    def test_by_section_and_row(self, doc):
        mutate_field(doc, "SCP", 0, 3, "0")
        assert doc.section("SCP").rows[0].fields[3] == "0"
        assert doc.is_dirty

    def test_unknown_section(self, doc):
        with pytest.raises(RecordReferenceError):
            mutate_field(doc, "NOPE", 0, 1, "x")

    def test_row_out_of_range(self, doc):
        with pytest.raises(RecordReferenceError):
            mutate_field(doc, "DPT", 99, 1, "x")
