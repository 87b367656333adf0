"""Tests for typed record views over document sections."""

from data_model import PluForm
from tms_parser import extract_cls, extract_dpt, extract_plu, extract_scp, parse

from .samples import CARROT, build_tms


def _by_id(records):
    return {r.id: r for r in records}


class TestExtractPlu:

    def test_record_count(self, doc):
        assert len(extract_plu(doc)) == 141

    def test_carrot(self, doc):
        plu = _by_id(extract_plu(doc))[9001]
        assert plu.row_index == 0
        assert plu.unit_type == 1
        assert plu.price == "600,0"
        assert plu.price2 == "0,0"
        assert plu.department == 9
        assert CARROT in plu.name
        assert plu.short_code == "K1"
        assert plu.field_count == 69
        assert plu.form is PluForm.LONG
        assert plu.has_short_code

    def test_count_unit(self, doc):
        plu = _by_id(extract_plu(doc))[9002]
        assert plu.unit_type == 2
        assert plu.price == "450,0"
        assert plu.name == "Leek"

    def test_short_form(self, doc):
        plu = _by_id(extract_plu(doc))[3]
        assert plu.form is PluForm.SHORT
        assert plu.field_count == 16
        assert plu.short_code is None
        assert not plu.has_short_code
        assert plu.price == "30,5"
        assert plu.department == 3
        assert plu.name == "Old 3"

    def test_long_form_with_empty_short_code(self, doc):
        plu = _by_id(extract_plu(doc))[15]
        assert plu.form is PluForm.LONG
        assert plu.short_code == ""

    def test_defaults_for_missing_columns(self):
        data = build_tms([("PLU", ["PLU\t7"])])
        [plu] = extract_plu(parse(data))
        assert plu.id == 7
        assert plu.unit_type == 1
        assert plu.price == "0,0"
        assert plu.price3 == "0,0"
        assert plu.department == 0
        assert plu.name == ""
        assert plu.form is PluForm.SHORT

    def test_zero_and_garbage_fall_back_to_default(self):
        data = build_tms([("PLU", [
            "PLU\t1\t0\t\t0\t\t0,0",
            "PLU\t2\t0\t\tx\t1,5",
            "PLU\tabc",
        ])])
        first, second, third = extract_plu(parse(data))
        assert first.unit_type == 1
        assert first.price == "0,0"
        assert second.unit_type == 1
        assert second.price == "1,5"
        assert third.id == 0

    def test_leading_integer_is_parsed(self):
        data = build_tms([("PLU", ["PLU\t12abc\t0\t\t2"])])
        [plu] = extract_plu(parse(data))
        assert plu.id == 12
        assert plu.unit_type == 2

    def test_missing_section(self):
        data = build_tms([("DPT", [])])
        assert extract_plu(parse(data)) == []


class TestExtractScp:

    def test_entry_count(self, doc):
        assert len(extract_scp(doc)) == 128

    def test_first_key_of_each_layer(self, doc):
        entries = {(e.layer, e.key_index): e for e in extract_scp(doc)}
        assert entries[(0, 1)].plu_id == 9001
        assert entries[(1, 1)].plu_id == 9041
        assert entries[(2, 1)].plu_id == 9081

    def test_extra_slots_unassigned(self, doc):
        extra = [e for e in extract_scp(doc) if e.key_index > 40]
        assert len(extra) == 8
        assert all(e.plu_id == 0 for e in extra)
        assert not any(e.is_grid_key for e in extra)
        assert not any(e.is_assigned for e in extra)

    def test_missing_section(self):
        assert extract_scp(parse(build_tms([]))) == []


class TestExtractDptCls:

    def test_dpt(self, doc):
        dpts = extract_dpt(doc)
        assert len(dpts) == 9
        assert dpts[0].id == 1
        assert dpts[0].name == "Dept 1"
        assert doc.section("DPT").rows[dpts[0].row_index].fields[-1] == ""

    def test_cls(self, doc):
        classes = extract_cls(doc)
        assert len(classes) == 10
        assert classes[0].name == "Class 1"
        assert classes[0].dept_id == 1
        assert classes[9].dept_id == 1

    def test_missing_sections(self):
        doc = parse(build_tms([("PLU", [])]))
        assert extract_dpt(doc) == []
        assert extract_cls(doc) == []


class TestNonAsciiDigitsOnRead:

    def test_fall_back_to_default(self):
        data = build_tms([("PLU", ["PLU\t٩\t0\t\t٢\t1,0\t0,0\t0,0\t0\t0\t0\t0\t0\t0\t٩\tX"])])
        [plu] = extract_plu(parse(data))
        assert plu.id == 0
        assert plu.unit_type == 1
        assert plu.department == 0
