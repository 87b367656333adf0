"""Tests for the section scanner and document structure."""

import logging

import pytest

from data_model import FormatError, LineEnding
from tms_parser import parse
from tms_parser.section_patterns import MarkerKind, is_section_end, match_marker
from tms_writer import serialize

from .samples import CRLF, LF, SECTION_ORDER, build_tms, reference_document


class TestReferenceDocument:

    def test_header(self, doc):
        assert "ECS" in doc.header_line.text
        assert "V3.15C5" in doc.header_line.text
        assert "UTF-8" in doc.header_line.text

    def test_detects_crlf(self, doc):
        assert doc.line_ending is LineEnding.CRLF

    def test_thirteen_sections_in_order(self, doc):
        assert doc.section_names == SECTION_ORDER

    def test_row_counts(self, doc):
        counts = {s.name: len(s.rows) for s in doc.sections}
        assert counts["DPT"] == 9
        assert counts["CLS"] == 10
        assert counts["PLU"] == 141
        assert counts["UNT"] == 0
        assert counts["BAR"] == 9
        assert counts["SCP"] == 128

    def test_trailing_tab_gives_empty_last_field(self, doc):
        row = doc.section("DPT").rows[0]
        assert len(row.fields) == 4
        assert row.fields[3] == ""

    def test_field_counts_always_aligned(self, doc):
        for section in doc.sections:
            for row in section.rows:
                assert len(row.fields) == len(row.raw_fields)

    def test_gap_before_scp(self, doc):
        scp_ordinal = SECTION_ORDER.index("SCP")
        assert [l.raw for l in doc.gaps[scp_ordinal]] == [b""]
        assert set(doc.gaps) == {scp_ordinal}

    def test_trailing_holds_end_of_file_marker(self, doc):
        assert [l.raw for l in doc.trailing] == [b"END\tECS\t"]

    def test_no_recovered_sections(self, doc):
        assert doc.recovered_sections == []
        assert not doc.is_dirty


class TestScannerEdgeCases:

    def test_empty_buffer_is_format_error(self):
        with pytest.raises(FormatError):
            parse(b"")

    def test_header_only(self):
        doc = parse(b"ECS\tV1\r\n")
        assert doc.sections == []
        assert doc.trailing == []
        assert doc.header_line.raw == b"ECS\tV1"

    def test_order_is_discovered_not_enforced(self):
        data = build_tms([("SCP", []), ("DPT", []), ("ZZZ", ["ZZZ\t1\t"])])
        assert parse(data).section_names == ["SCP", "DPT", "ZZZ"]

    def test_stray_lines_between_sections(self):
        data = build_tms(
            [("DPT", []), ("CLS", [])],
            gaps={0: ["", "garbage\tline"], 1: ["END\tPLU\t"]},
        )
        doc = parse(data)
        assert [l.raw for l in doc.gaps[0]] == [b"", b"garbage\tline"]
        assert [l.raw for l in doc.gaps[1]] == [b"END\tPLU\t"]
        assert serialize(doc) == data

    def test_end_marker_of_other_section_is_a_row(self):
        data = build_tms([("DPT", ["END\tCLS\t", "DPT\t1\tA\t"])])
        doc = parse(data)
        assert len(doc.section("DPT").rows) == 2

    def test_content_after_end_of_file_marker(self):
        data = build_tms([("DPT", [])], trailing=["", "END\tECS\t", "XD1\tPLU\t", "tail"])
        doc = parse(data)
        assert doc.section_names == ["DPT"]
        assert [l.raw for l in doc.trailing] == [b"", b"END\tECS\t", b"XD1\tPLU\t", b"tail"]
        assert serialize(doc) == data

    def test_missing_end_of_file_marker_moves_gap_to_trailing(self):
        data = build_tms([("DPT", [])], trailing=["", "leftover"])
        doc = parse(data)
        assert [l.raw for l in doc.trailing] == [b"", b"leftover"]
        assert serialize(doc) == data

    def test_unterminated_section_is_recovered(self, caplog):
        data = b"ECS\r\nXD1\tPLU\t\r\nPLU\t1\t\r\n"
        with caplog.at_level(logging.WARNING):
            doc = parse(data)
        section = doc.section("PLU")
        assert section.recovered
        assert section.end_line.raw == b"END\tPLU\t"
        assert len(section.rows) == 1
        assert doc.recovered_sections == ["PLU"]
        assert "PLU" in caplog.text
        assert serialize(doc) == data + b"END\tPLU\t\r\n"

    def test_lf_document(self):
        data = reference_document(ending=LF)
        doc = parse(data)
        assert doc.line_ending is LineEnding.LF
        assert len(doc.sections) == 13
        assert serialize(doc) == data

    def test_buffer_without_final_terminator(self):
        data = build_tms([("DPT", ["DPT\t1\tA\t"])], ending=CRLF)[:-2]
        doc = parse(data)
        # serializer always terminates the last line
        assert serialize(doc) == data + CRLF

    def test_invalid_utf8_is_preserved(self):
        data = b"ECS\r\nXD1\tDPT\t\r\nDPT\t1\t\xff\xfe\t\r\nEND\tDPT\t\r\nEND\tECS\t\r\n"
        doc = parse(data)
        row = doc.section("DPT").rows[0]
        assert row.raw_fields[2] == b"\xff\xfe"
        assert serialize(doc) == data


class TestMarkers:

    def test_section_end_uses_the_marker_table(self):
        marker = match_marker("END\tPLU\t")
        assert marker.kind is MarkerKind.SECTION_END
        assert is_section_end("END\tPLU\t", marker.name)
        assert not is_section_end("END\tPLUS\t", "PLU")
        assert not is_section_end("XEND\tPLU\t", "PLU")
