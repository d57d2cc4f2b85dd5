"""Tests for event and junction slot models."""

import attrs
import pytest

from splicenorm.core.models import (
    EMPTY_SLOT,
    Boundaries,
    EmptySlot,
    EventFormatError,
    EventType,
    JunctionSlots,
    NormalizedEvent,
    OneSlot,
    OverflowSlot,
    RawEvent,
    TwoSlot,
    make_slot,
)


# =============================================================================
# Test Slots
# =============================================================================


class TestMakeSlot:
    """Tests for building slot variants from coordinate lists."""

    def test_empty(self):
        """No coordinates give an empty slot."""
        slot = make_slot([])
        assert isinstance(slot, EmptySlot)
        assert slot.values == ()
        assert slot.first is None
        assert len(slot) == 0

    def test_one(self):
        """One coordinate gives a single-valued slot."""
        slot = make_slot([100])
        assert slot == OneSlot(100)
        assert slot.values == (100,)
        assert slot.first == 100

    def test_two(self):
        """Two coordinates keep their source order."""
        slot = make_slot([300, 200])
        assert slot == TwoSlot(300, 200)
        assert slot.values == (300, 200)
        assert slot.first == 300

    def test_overflow(self):
        """More than two coordinates give an overflow slot."""
        slot = make_slot([1, 2, 3])
        assert isinstance(slot, OverflowSlot)
        assert slot.values == (1, 2, 3)
        assert slot.first == 1
        assert len(slot) == 3

    def test_slots_are_immutable(self):
        """Slots cannot be modified."""
        slot = OneSlot(5)
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            slot.value = 6


class TestJunctionSlots:
    """Tests for the four-slot container."""

    def test_from_values_pads(self):
        """Fewer than four groups are padded with empty slots."""
        slots = JunctionSlots.from_values([1], [2, 3])
        assert len(slots) == 4
        assert slots[0] == OneSlot(1)
        assert slots[1] == TwoSlot(2, 3)
        assert slots[2] == EMPTY_SLOT
        assert slots[3] == EMPTY_SLOT

    def test_from_values_truncates(self):
        """Groups beyond the fourth are ignored."""
        slots = JunctionSlots.from_values([1], [2], [3], [4], [5])
        assert [s.first for s in slots] == [1, 2, 3, 4]

    def test_requires_four_slots(self):
        """Direct construction checks arity."""
        with pytest.raises(ValueError):
            JunctionSlots([OneSlot(1), OneSlot(2)])


# =============================================================================
# Test RawEvent
# =============================================================================


class TestRawEvent:
    """Tests for reading raw VAST-TOOLS rows."""

    def test_from_line(self, se_row):
        """Read the documented skipped exon row."""
        raw = RawEvent.from_line(se_row)
        assert raw.gene_symbol == "NFYA"
        assert raw.event_id == "HsaEX0042823"
        assert raw.coordinates == "chr6:41040823,41046768-41046903,41051785"
        assert raw.event_type_code == "C2"
        assert raw.inclusion_levels == (0.0, 0.0)

    def test_from_line_with_separator(self):
        """Tab-separated rows are split on tabs only."""
        line = "\t".join(["G", "E1", "x", "1", "chr1:1,2-3,4", "S", "10", "N", "20"]) + "\n"
        raw = RawEvent.from_line(line, sep="\t")
        assert raw.coordinates == "chr1:1,2-3,4"
        assert raw.inclusion_levels == (10.0, 20.0)

    def test_six_columns_no_inclusion(self):
        """Rows without column 7 carry no inclusion levels."""
        raw = RawEvent.from_columns(["G", "E1", "x", "1", "chr1:1,2-3,4", "S"])
        assert raw.inclusion_levels == ()

    def test_seven_columns_inclusion_a(self):
        """Column 7 alone gives inclusion level A only."""
        raw = RawEvent.from_columns(["G", "E1", "x", "1", "chr1:1,2-3,4", "S", "55.5"])
        assert raw.inclusion_levels == (55.5,)

    def test_eight_columns_inclusion_a(self):
        """Column 8 is not an inclusion level."""
        raw = RawEvent.from_columns(["G", "E1", "x", "1", "chr1:1,2-3,4", "S", "55.5", "N"])
        assert raw.inclusion_levels == (55.5,)

    def test_missing_inclusion_values(self):
        """NA and non-numeric inclusion cells become None but stay present."""
        raw = RawEvent.from_columns(["G", "E1", "x", "1", "chr1:1,2-3,4", "S", "NA", "N", "abc"])
        assert raw.inclusion_levels == (None, None)

    def test_identifiers_coerced_to_str(self):
        """Identity columns are stored as strings."""
        raw = RawEvent.from_columns([123, 456, None, None, "chr1:1,2-3,4", "S"])
        assert raw.gene_symbol == "123"
        assert raw.event_id == "456"

    def test_too_few_columns(self):
        """Rows shorter than six columns raise EventFormatError."""
        with pytest.raises(EventFormatError, match="at least 6"):
            RawEvent.from_columns(["G", "E1", "x", "1", "chr1:1,2-3,4"])

    def test_format_error_is_value_error(self):
        """EventFormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            RawEvent.from_line("G E1")


# =============================================================================
# Test NormalizedEvent
# =============================================================================


class TestNormalizedEvent:
    """Tests for the normalized event record."""

    def test_defaults(self):
        """Boundaries default to None and program to VAST-TOOLS."""
        event = NormalizedEvent(
            gene_symbol="G",
            event_id="E",
            event_type=EventType.SE,
            chromosome="chr1",
            strand="+",
        )
        assert event.program == "VAST-TOOLS"
        assert event.boundaries == Boundaries()
        assert event.inclusion_a is None
        assert event.inclusion_b is None

    def test_flat_accessors(self):
        """Boundary fields are reachable from the event."""
        boundaries = Boundaries(1, 2, 3, 4, 5, 6, 7, 8)
        event = NormalizedEvent("G", "E", EventType.RI, "chr1", "-", boundaries, (0.5, 0.25))
        assert (event.c1_start, event.c1_end) == (1, 2)
        assert (event.a1_start, event.a1_end) == (3, 4)
        assert (event.a2_start, event.a2_end) == (5, 6)
        assert (event.c2_start, event.c2_end) == (7, 8)
        assert event.inclusion_a == 0.5
        assert event.inclusion_b == 0.25

    def test_boundaries_tuple_order(self):
        """as_tuple follows output column order."""
        boundaries = Boundaries(c1_end=10, c2_start=20)
        assert boundaries.as_tuple() == (None, 10, None, None, None, None, 20, None)

    def test_event_type_labels(self):
        """Every event type has a readable label."""
        assert EventType.SE.label == "Skipped exon"
        assert EventType.RI.label == "Intron retention"
        assert all(t.label for t in EventType)
