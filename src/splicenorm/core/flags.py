"""Diagnostic flags raised while normalizing splicing events.

Parsing never fails on coordinate content: malformed tokens, short
coordinate fields and ambiguous multi-site slots all degrade to a partial
record. Flags make those degradations visible to callers that need
strict checking.

Example:
    >>> from splicenorm.core.events import parse_event_with_diagnostics
    >>> from splicenorm.core.flags import ParseFlags
    >>> result = parse_event_with_diagnostics(raw)
    >>> ParseFlags.UNRECOGNIZED_EVENT_TYPE in result.flags
    False
"""

from collections.abc import Iterable
from enum import Enum

import attrs


# =============================================================================
# Enums
# =============================================================================


class FlagSeverity(Enum):
    """Severity levels for parse flags.

    - INFO: Expected for some inputs, record is complete
    - WARNING: Record may be incomplete or misclassified
    """

    INFO = "info"
    WARNING = "warning"

    def __lt__(self, other: "FlagSeverity") -> bool:
        order = [FlagSeverity.INFO, FlagSeverity.WARNING]
        return order.index(self) < order.index(other)

    def __le__(self, other: "FlagSeverity") -> bool:
        return self == other or self < other

    def __gt__(self, other: "FlagSeverity") -> bool:
        return not self <= other

    def __ge__(self, other: "FlagSeverity") -> bool:
        return not self < other


# =============================================================================
# ParseFlag Data Class
# =============================================================================


@attrs.define(frozen=True)
class ParseFlag:
    """A diagnostic raised for one parsed row.

    Attributes:
        code: Short flag code (e.g., "UNKNOWN_TYPE").
        name: Human-readable flag name.
        description: What happened to the record.
        severity: Severity level.
    """

    code: str
    name: str
    description: str
    severity: FlagSeverity

    def __hash__(self) -> int:
        return hash(self.code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseFlag):
            return False
        return self.code == other.code


# =============================================================================
# Flags Registry
# =============================================================================


class ParseFlags:
    """Registry of all parse flags.

    Access flags directly:
        >>> ParseFlags.OVERSIZED_SLOT
        >>> ParseFlags.get_all()
    """

    UNRECOGNIZED_EVENT_TYPE = ParseFlag(
        code="UNKNOWN_TYPE",
        name="Unrecognized Event Type",
        description="Event type code is not known; event was parsed as a skipped exon",
        severity=FlagSeverity.WARNING,
    )

    MALFORMED_TOKEN = ParseFlag(
        code="MALFORMED_TOKEN",
        name="Malformed Token",
        description="A coordinate token is not an integer and was dropped",
        severity=FlagSeverity.WARNING,
    )

    PADDED_SLOTS = ParseFlag(
        code="PADDED_SLOTS",
        name="Padded Junction Slots",
        description="Coordinate field held fewer than 4 junction slots; missing slots are empty",
        severity=FlagSeverity.INFO,
    )

    OVERSIZED_SLOT = ParseFlag(
        code="OVERSIZED_SLOT",
        name="Oversized Junction Slot",
        description="A junction slot holds more than 2 sites; only a partial record was produced",
        severity=FlagSeverity.WARNING,
    )

    UNRESOLVED_STRAND = ParseFlag(
        code="UNRESOLVED_STRAND",
        name="Unresolved Strand",
        description="Strand could not be read or compared and defaulted to minus",
        severity=FlagSeverity.WARNING,
    )

    @classmethod
    def get_all(cls) -> list[ParseFlag]:
        """Get all registered flags.

        Returns:
            List of all ParseFlag instances.
        """
        return [
            value for name, value in vars(cls).items()
            if isinstance(value, ParseFlag)
        ]

    @classmethod
    def get_by_code(cls, code: str) -> ParseFlag | None:
        """Get a flag by its code.

        Args:
            code: The flag code.

        Returns:
            The ParseFlag or None if not found.
        """
        for flag in cls.get_all():
            if flag.code == code:
                return flag
        return None


# =============================================================================
# Utility Functions
# =============================================================================


def summarize_flags(flags: Iterable[ParseFlag]) -> dict[str, int]:
    """Count flags by code.

    Args:
        flags: Iterable of parse flags.

    Returns:
        Dict mapping flag code to count.
    """
    summary: dict[str, int] = {}
    for flag in flags:
        summary[flag.code] = summary.get(flag.code, 0) + 1
    return summary


def max_severity(flags: Iterable[ParseFlag]) -> FlagSeverity | None:
    """Get the maximum severity from a collection of flags.

    Args:
        flags: Iterable of parse flags.

    Returns:
        Maximum severity, or None if empty.
    """
    flag_list = list(flags)
    if not flag_list:
        return None
    return max(f.severity for f in flag_list)
