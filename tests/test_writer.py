"""Tests for serialization, byte-exact round trip and diagnostics."""

import pytest

from data_model import NewPluParams, PluField, RecordReferenceError
from tms_parser import extract_plu, parse
from tms_parser.lines import split_lines
from tms_writer import (
    append_row,
    create_plu_row,
    diff_lines,
    hex_context,
    mutate_field,
    remove_row,
    serialize,
    verify_round_trip,
)

from .samples import LF, build_tms, reference_document


def _section_bytes(data: bytes, name: str) -> list[bytes]:
    doc = parse(data)
    return [row.to_bytes() for row in doc.section(name).rows]


class TestIdentityRoundTrip:

    def test_crlf_reference(self, reference_bytes, doc):
        assert serialize(doc) == reference_bytes

    def test_lf_reference(self):
        data = reference_document(ending=LF)
        assert serialize(parse(data)) == data

    def test_serialize_does_not_mutate(self, doc):
        first = serialize(doc)
        assert serialize(doc) == first
        assert not doc.is_dirty

    def test_verify_reports_match(self, reference_bytes, doc):
        result = verify_round_trip(reference_bytes, serialize(doc))
        assert result.match
        assert result.first_diff_at == -1
        assert not result.length_mismatch


class TestPriceEdit:

    @pytest.fixture
    def edited(self, doc):
        mutate_field(doc, "PLU", 0, PluField.PRICE, "750,0")
        return serialize(doc)

    def test_output_differs(self, reference_bytes, edited):
        result = verify_round_trip(reference_bytes, edited)
        assert not result.match
        assert result.first_diff_at > 0

    def test_exactly_one_line_differs(self, reference_bytes, edited):
        diffs = diff_lines(reference_bytes, edited)
        assert len(diffs) == 1
        assert b"600,0" in diffs[0].original
        assert b"750,0" in diffs[0].output

    def test_field_count_preserved(self, edited):
        carrot = extract_plu(parse(edited))[0]
        assert carrot.price == "750,0"
        assert carrot.field_count == 69

    def test_neighbour_plu_unchanged(self, edited):
        by_id = {p.id: p for p in extract_plu(parse(edited))}
        assert by_id[9002].price == "450,0"

    def test_other_sections_unchanged(self, reference_bytes, edited):
        for name in ("DPT", "CLS", "BAR", "SCP", "TIM"):
            assert _section_bytes(edited, name) == _section_bytes(reference_bytes, name)

    def test_edited_line_keeps_trailing_tab(self, edited):
        lines = split_lines(edited, parse(edited).line_ending)
        carrot = next(l for l in lines if l.raw.startswith(b"PLU\t9001\t"))
        assert carrot.raw.endswith(b"\t")


class TestVerifyRoundTrip:

    def test_first_difference(self):
        result = verify_round_trip(b"abcdef", b"abXdef")
        assert not result.match
        assert result.first_diff_at == 2

    def test_length_mismatch_reports_shorter_length(self):
        result = verify_round_trip(b"abc", b"abcde")
        assert not result.match
        assert result.first_diff_at == 3
        assert result.length_mismatch
        assert result.original_length == 3
        assert result.output_length == 5

    def test_empty_buffers_match(self):
        assert verify_round_trip(b"", b"").match


class TestDiagnostics:

    def test_diff_lines_reports_extra_line(self):
        diffs = diff_lines(b"a\r\nb\r\n", b"a\r\nb\r\nc\r\n")
        assert len(diffs) == 1
        assert diffs[0].line_no == 3
        assert diffs[0].original is None
        assert diffs[0].output == b"c"

    def test_diff_lines_identical(self, reference_bytes):
        assert diff_lines(reference_bytes, reference_bytes) == []

    def test_hex_context(self):
        assert hex_context(b"\x00\x01\x02\x03", 2, width=1) == "01 02"

    def test_hex_context_clamps_at_start(self):
        assert hex_context(b"AB", 0, width=4) == "41 42"


class TestRowMutations:

    def test_create_plu_row_template(self):
        row = create_plu_row(NewPluParams(id=500, name="Kale", price="12,5", unit_type=2, department=4))
        assert row.field_count == 69
        assert row.dirty
        assert row.fields[PluField.ID] == "500"
        assert row.fields[PluField.UNIT_TYPE] == "2"
        assert row.fields[PluField.PRICE] == "12,5"
        assert row.fields[PluField.DEPARTMENT] == "4"
        assert row.fields[PluField.NAME] == "Kale"
        assert row.fields[-1] == ""
        assert row.to_bytes().endswith(b"\t")

    def test_append_row_only_touches_target_section(self, reference_bytes, doc):
        row = create_plu_row(NewPluParams(id=500, name="Kale", price="12,5"))
        index = append_row(doc, "PLU", row)
        assert index == 141
        output = serialize(doc)
        diffs = diff_lines(reference_bytes, output)
        assert diffs[0].output.startswith(b"PLU\t500\t")
        assert _section_bytes(output, "SCP") == _section_bytes(reference_bytes, "SCP")
        assert parse(output).gaps.keys() == doc.gaps.keys()

    def test_remove_row(self, reference_bytes, doc):
        removed = remove_row(doc, "DPT", 0)
        assert removed.fields[1] == "1"
        output = serialize(doc)
        assert len(output) == len(reference_bytes) - len(b"DPT\t1\tDept 1\t\r\n")
        assert len(parse(output).section("DPT").rows) == 8

    def test_remove_row_out_of_range(self, doc):
        with pytest.raises(RecordReferenceError):
            remove_row(doc, "DPT", 9)
        assert len(doc.section("DPT").rows) == 9

    def test_unknown_section(self, doc):
        with pytest.raises(RecordReferenceError):
            append_row(doc, "XYZ", create_plu_row(NewPluParams(id=1, name="a", price="1,0")))

    def test_empty_section_append(self):
        data = build_tms([("UNT", [])])
        doc = parse(data)
        row = parse(build_tms([("UNT", ["UNT\t1\tkg\t"])])).section("UNT").rows[0]
        append_row(doc, "UNT", row)
        assert serialize(doc) == build_tms([("UNT", ["UNT\t1\tkg\t"])])
