"""Tests for line-ending detection and line/field splitting."""

from data_model import LineEnding
from tms_parser.lines import detect_line_ending, join_with_tab, split_lines, split_on_tab


class TestDetectLineEnding:

    def test_crlf(self):
        assert detect_line_ending(b"a\r\nb\r\n") is LineEnding.CRLF

    def test_lf(self):
        assert detect_line_ending(b"a\nb\n") is LineEnding.LF

    def test_first_lf_decides(self):
        """Only the first line feed is inspected."""
        assert detect_line_ending(b"a\nb\r\n") is LineEnding.LF
        assert detect_line_ending(b"a\r\nb\n") is LineEnding.CRLF

    def test_no_line_feed_defaults_to_crlf(self):
        assert detect_line_ending(b"single line") is LineEnding.CRLF
        assert detect_line_ending(b"") is LineEnding.CRLF

    def test_leading_lf(self):
        assert detect_line_ending(b"\nabc") is LineEnding.LF


class TestSplitLines:

    def test_terminated_buffer_has_no_phantom_line(self):
        lines = split_lines(b"a\r\nb\r\n", LineEnding.CRLF)
        assert [l.raw for l in lines] == [b"a", b"b"]

    def test_unterminated_last_line_kept(self):
        lines = split_lines(b"a\r\nb", LineEnding.CRLF)
        assert [l.raw for l in lines] == [b"a", b"b"]

    def test_blank_lines_preserved(self):
        lines = split_lines(b"a\n\n\nb\n", LineEnding.LF)
        assert [l.raw for l in lines] == [b"a", b"", b"", b"b"]

    def test_lone_lf_stays_inside_crlf_line(self):
        lines = split_lines(b"a\nb\r\nc\r\n", LineEnding.CRLF)
        assert [l.raw for l in lines] == [b"a\nb", b"c"]

    def test_empty_buffer(self):
        assert split_lines(b"", LineEnding.CRLF) == []

    def test_text_is_best_effort_decode(self):
        lines = split_lines(b"ok\xff\r\n", LineEnding.CRLF)
        assert lines[0].raw == b"ok\xff"
        assert lines[0].text.startswith("ok")


class TestSplitOnTab:

    def test_n_delimiters_give_n_plus_one_fields(self):
        assert split_on_tab(b"a\tb\tc") == [b"a", b"b", b"c"]

    def test_trailing_tab_yields_empty_field(self):
        assert split_on_tab(b"DPT\t1\tFruit\t") == [b"DPT", b"1", b"Fruit", b""]

    def test_consecutive_tabs(self):
        assert split_on_tab(b"a\t\t\tb") == [b"a", b"", b"", b"b"]

    def test_empty_line_is_one_empty_field(self):
        assert split_on_tab(b"") == [b""]

    def test_join_is_inverse(self):
        raw = b"PLU\t9001\t\t\t600,0\t"
        assert join_with_tab(split_on_tab(raw)) == raw
