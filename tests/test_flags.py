"""Tests for parse diagnostic flags."""

from splicenorm.core.flags import (
    FlagSeverity,
    ParseFlag,
    ParseFlags,
    max_severity,
    summarize_flags,
)


class TestParseFlag:
    """Tests for ParseFlag class."""

    def test_flag_hashable(self):
        """Flags can be collected in sets."""
        flag_set = {ParseFlags.OVERSIZED_SLOT, ParseFlags.PADDED_SLOTS}
        flag_set.add(ParseFlags.OVERSIZED_SLOT)
        assert len(flag_set) == 2

    def test_flag_equality(self):
        """Flag equality is based on code."""
        flag1 = ParseFlag("SAME", "Name1", "Desc1", FlagSeverity.INFO)
        flag2 = ParseFlag("SAME", "Name2", "Desc2", FlagSeverity.WARNING)
        assert flag1 == flag2
        assert flag1 != "SAME"


class TestFlagSeverity:
    """Tests for severity ordering."""

    def test_ordering(self):
        assert FlagSeverity.INFO < FlagSeverity.WARNING
        assert FlagSeverity.WARNING > FlagSeverity.INFO
        assert FlagSeverity.INFO <= FlagSeverity.INFO
        assert FlagSeverity.WARNING >= FlagSeverity.WARNING


class TestParseFlagsRegistry:
    """Tests for the flag registry."""

    def test_get_all(self):
        codes = {flag.code for flag in ParseFlags.get_all()}
        assert codes == {
            "UNKNOWN_TYPE",
            "MALFORMED_TOKEN",
            "PADDED_SLOTS",
            "OVERSIZED_SLOT",
            "UNRESOLVED_STRAND",
        }

    def test_get_by_code(self):
        assert ParseFlags.get_by_code("OVERSIZED_SLOT") is ParseFlags.OVERSIZED_SLOT
        assert ParseFlags.get_by_code("NOPE") is None


class TestUtilities:
    """Tests for flag summaries."""

    def test_summarize(self):
        flags = [ParseFlags.PADDED_SLOTS, ParseFlags.PADDED_SLOTS, ParseFlags.MALFORMED_TOKEN]
        assert summarize_flags(flags) == {"PADDED_SLOTS": 2, "MALFORMED_TOKEN": 1}

    def test_max_severity(self):
        assert max_severity([]) is None
        assert max_severity([ParseFlags.PADDED_SLOTS]) is FlagSeverity.INFO
        assert max_severity([ParseFlags.PADDED_SLOTS, ParseFlags.OVERSIZED_SLOT]) is FlagSeverity.WARNING
