"""
Unit tests for the loading plan parser.
"""

import io
import logging

import pytest

from ramp_placement.planning.loading_plan import LoadingPlan
from ramp_placement.planning.parser import (
    parse_file,
    parse_line,
    parse_lines,
    parse_resource,
    parse_stream,
    parse_text,
    sample_plan_content,
)
from ramp_placement.planning.types import PlanEntry


class TestParseLine:
    """Tests for single-line parsing."""

    def test_valid_line(self):
        entry = parse_line("ContainerID=AKE123, Weight=4800, Position=2R")
        assert entry == PlanEntry("AKE123", 4800.0, "2R")

    def test_segment_order_does_not_matter(self):
        entry = parse_line("Position=1L, ContainerID=AKE456, Weight=3000")
        assert entry == PlanEntry("AKE456", 3000.0, "1L")

    def test_whitespace_around_keys_and_values(self):
        entry = parse_line("  ContainerID = AKE1 ,Weight= 12.5 ,  Position =3L ")
        assert entry == PlanEntry("AKE1", 12.5, "3L")

    def test_missing_weight_defaults_to_zero(self):
        entry = parse_line("ContainerID=AKE1, Position=1L, Note=fragile")
        assert entry.expected_weight_kg == 0.0

    @pytest.mark.parametrize(
        "line",
        [
            "ContainerID=BAD",
            "ContainerID=A, Weight=1, Position=1L, Extra=x",
            "ContainerID=A, Weight=heavy, Position=1L",
            "ContainerID=A, Weight=nan, Position=1L",
            "ContainerID=, Weight=1, Position=1L",
            "ContainerID=A, Weight=1, Position=",
            "ContainerID=A, Weight=1, Slot=1L",
        ],
    )
    def test_malformed_lines(self, line):
        assert parse_line(line) is None


class TestParseLines:
    """Tests for multi-line parsing."""

    def test_malformed_line_is_skipped(self, caplog):
        text = "ContainerID=AKE456, Weight=3000, Position=1L\n# comment\n\nContainerID=BAD\n"
        with caplog.at_level(logging.WARNING):
            plan = parse_text(text)

        assert plan.container_ids() == ["AKE456"]
        assert "Failed to parse line 4" in caplog.text

    def test_later_entry_replaces_earlier(self):
        plan = parse_text(
            "ContainerID=A, Weight=1, Position=1L\n"
            "ContainerID=A, Weight=2, Position=2R\n"
        )
        assert len(plan) == 1
        assert plan.get_entry("A") == PlanEntry("A", 2.0, "2R")

    def test_byte_order_mark_is_stripped(self):
        plan = parse_text("\ufeffContainerID=A, Weight=1, Position=1L\n")
        assert "A" in plan

    def test_bytes_lines(self):
        plan = parse_lines([b"ContainerID=A, Weight=1, Position=1L\n"])
        assert plan.get_entry("A").expected_slot_code == "1L"

    def test_binary_stream(self):
        plan = parse_stream(io.BytesIO(b"ContainerID=A, Weight=1, Position=1L\n"))
        assert "A" in plan

    def test_undecodable_line_is_skipped(self, caplog):
        data = (
            b"ContainerID=AKE1, Weight=1, Position=1L\n"
            b"ContainerID=\xff\xfe, Weight=2, Position=2L\n"
            b"ContainerID=AKE3, Weight=3, Position=3L\n"
        )
        with caplog.at_level(logging.WARNING):
            plan = parse_stream(io.BytesIO(data))

        assert plan.container_ids() == ["AKE1", "AKE3"]
        assert "line 2" in caplog.text

    def test_adds_to_existing_plan(self, demo_plan):
        result = parse_lines(["ContainerID=NEW1, Weight=100, Position=4L"], plan=demo_plan)
        assert result is demo_plan
        assert len(demo_plan) == 3
        assert demo_plan.get_max_weight_for_slot("4L") == 5000.0

    def test_empty_input(self):
        assert len(parse_text("")) == 0


class TestParseSources:
    """Tests for file and resource entry points."""

    def test_parse_file(self, tmp_path):
        path = tmp_path / "plan.txt"
        path.write_text(sample_plan_content(), encoding="utf-8")

        plan = parse_file(path)
        assert plan.container_ids() == ["AKE123", "AKE456", "AKE789", "PMC001"]

    def test_file_with_bad_byte_in_comment(self, tmp_path):
        path = tmp_path / "plan.txt"
        path.write_bytes(
            b"# caf\xe9 note\r\n"
            b"ContainerID=AKE1, Weight=1, Position=1L\r\n"
        )

        plan = parse_file(path)
        assert plan.get_entry("AKE1") == PlanEntry("AKE1", 1.0, "1L")

    def test_file_with_byte_order_mark(self, tmp_path):
        path = tmp_path / "plan.txt"
        path.write_bytes(b"\xef\xbb\xbfContainerID=AKE1, Weight=1, Position=1L\n")

        assert "AKE1" in parse_file(path)

    def test_missing_file_raises_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_file(tmp_path / "nonexistent.txt")

    def test_bundled_resource(self):
        plan = parse_resource()
        assert isinstance(plan, LoadingPlan)
        assert plan.get_entry("PMC001") == PlanEntry("PMC001", 4200.0, "2L")
        assert len(plan) == 4

    def test_missing_resource(self):
        with pytest.raises(FileNotFoundError):
            parse_resource("no_such_plan.txt")
