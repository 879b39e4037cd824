"""Tests for raw input sanitization."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.compartment import Compartment
from data.sanitize import (
    to_number,
    to_int,
    normalize_number_string,
    normalize_int_string,
    parse_compartment,
    sanitize_inputs,
)


def make_raw(total="1000", pieces="100", avi="0", target="CP3", remove="0"):
    return {
        "total_weight_kg": total,
        "piece_count": pieces,
        "reserved_weight_kg": avi,
        "correction_target": target,
        "correction_pieces": remove,
    }


class TestToNumber:
    def test_valid(self):
        assert to_number("12.5") == 12.5
        assert to_number(" 7 ") == 7
        assert to_number(3) == 3

    def test_collapses_to_zero(self):
        for raw in ["", "   ", None, "abc", "-3", "inf", "nan", "-0"]:
            assert to_number(raw) == 0

    def test_to_int_floors(self):
        assert to_int("7.9") == 7
        assert to_int("-2") == 0
        assert to_int("x") == 0


class TestNormalize:
    def test_number_string(self):
        assert normalize_number_string("5.0") == "5"
        assert normalize_number_string("2.50") == "2.5"
        assert normalize_number_string("oops") == "0"
        assert normalize_number_string("") == "0"

    def test_int_string(self):
        assert normalize_int_string("3.7") == "3"
        assert normalize_int_string("-1") == "0"


class TestParseCompartment:
    def test_known(self):
        assert parse_compartment("cp2") == Compartment.CP2
        assert parse_compartment("CP5") == Compartment.CP5

    def test_unknown_falls_back(self):
        assert parse_compartment("CP9") == Compartment.CP3
        assert parse_compartment(None) == Compartment.CP3

    def test_enum_member_passes_through(self):
        for cp in Compartment:
            assert parse_compartment(cp) is cp

    def test_enum_member_in_sanitize_inputs(self):
        inputs, result = sanitize_inputs({"correction_target": Compartment.CP5})

        assert inputs.correction_target == Compartment.CP5
        assert not result.has_warnings


class TestSanitizeInputs:
    def test_clean_inputs(self):
        inputs, result = sanitize_inputs(make_raw(remove="4", target="CP2"))

        assert inputs.total_weight_kg == 1000
        assert inputs.piece_count == 100
        assert inputs.correction_target == Compartment.CP2
        assert inputs.correction_pieces == 4
        assert not result.has_warnings

    def test_malformed_field_warns(self):
        inputs, result = sanitize_inputs(make_raw(total="abc", pieces="-5"))

        assert inputs.total_weight_kg == 0
        assert inputs.piece_count == 0
        assert len(result.warnings) == 2
        assert "TOTAL (kg)" in result.warnings[0]
        assert "Pieces" in result.warnings[1]

    def test_unknown_target_warns(self):
        inputs, result = sanitize_inputs(make_raw(target="CP7"))

        assert inputs.correction_target == Compartment.CP3
        assert any("CP7" in w for w in result.warnings)

    def test_avi_above_total_warns(self):
        _, result = sanitize_inputs(make_raw(total="100", avi="200"))
        assert any("AVI" in w for w in result.warnings)

    def test_numeric_values(self):
        inputs, result = sanitize_inputs({"total_weight_kg": 1000, "piece_count": 100.0})

        assert inputs.total_weight_kg == 1000
        assert inputs.piece_count == 100
        assert inputs.correction_target == Compartment.CP3
        assert not result.has_warnings

    def test_never_negative(self):
        inputs, _ = sanitize_inputs(make_raw(total="-1", pieces="-1", avi="-1", remove="-1"))
        assert inputs.total_weight_kg == 0
        assert inputs.piece_count == 0
        assert inputs.reserved_weight_kg == 0
        assert inputs.correction_pieces == 0


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
