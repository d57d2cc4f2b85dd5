"""Data models for alternative splicing events.

Raw VAST-TOOLS rows are read into RawEvent, their coordinate fields are
split into four junction slots, and each row ends up as one immutable
NormalizedEvent with explicit exon boundaries and strand.

Boundary naming:
    - C1, C2: constitutive exons flanking the event
    - A1, A2: alternative splice positions; which of them are populated
      depends on the event type

Coordinates are plain integers copied from the source tool. No
coordinate system or genome build is attached to them.

Example:
    >>> from splicenorm.core.models import RawEvent
    >>> raw = RawEvent.from_line(
    ...     "NFYA HsaEX0042823 chr6:41046768-41046903 136 "
    ...     "chr6:41040823,41046768-41046903,41051785 C2 0 N 0 N"
    ... )
    >>> raw.event_type_code
    'C2'
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum
from typing import Literal, Union

import attrs

# =============================================================================
# Constants
# =============================================================================

PROGRAM_VAST_TOOLS = "VAST-TOOLS"

# Positional columns of a VAST-TOOLS event row (0-based)
COL_GENE_SYMBOL = 0
COL_EVENT_ID = 1
COL_COORDINATES = 4
COL_EVENT_TYPE = 5
COL_INCLUSION_A = 6
COL_INCLUSION_B = 8

MIN_COLUMNS = COL_EVENT_TYPE + 1

# Values the source tool writes for a missing inclusion level
MISSING_VALUES = {"", "NA", "NaN", "nan"}

Strand = Literal["+", "-"]


class EventFormatError(ValueError):
    """Raised when a row is too short to describe a splicing event."""


# =============================================================================
# Enums
# =============================================================================


class EventType(Enum):
    """Alternative splicing event types."""

    SE = "SE"  # Skipped exon
    RI = "RI"  # Intron retention
    A5SS = "A5SS"  # Alternative 5' splice site
    A3SS = "A3SS"  # Alternative 3' splice site

    @property
    def label(self) -> str:
        """Human-readable event type name."""
        return _EVENT_TYPE_LABELS[self]


_EVENT_TYPE_LABELS = {
    EventType.SE: "Skipped exon",
    EventType.RI: "Intron retention",
    EventType.A5SS: "Alternative 5' splice site",
    EventType.A3SS: "Alternative 3' splice site",
}


# =============================================================================
# Junction Slots
# =============================================================================


class _SlotBase:
    """Shared accessors for junction slot variants."""

    __slots__ = ()

    @property
    def values(self) -> tuple[int, ...]:
        raise NotImplementedError

    @property
    def first(self) -> int | None:
        """First coordinate in the slot, or None if the slot is empty."""
        values = self.values
        return values[0] if values else None

    def __len__(self) -> int:
        return len(self.values)


@attrs.define(frozen=True, slots=True)
class EmptySlot(_SlotBase):
    """A junction slot with no coordinate."""

    @property
    def values(self) -> tuple[int, ...]:
        return ()


@attrs.define(frozen=True, slots=True)
class OneSlot(_SlotBase):
    """A junction slot with a single coordinate."""

    value: int

    @property
    def values(self) -> tuple[int, ...]:
        return (self.value,)


@attrs.define(frozen=True, slots=True)
class TwoSlot(_SlotBase):
    """A junction slot with two alternative coordinates."""

    left: int
    right: int

    @property
    def values(self) -> tuple[int, ...]:
        return (self.left, self.right)


@attrs.define(frozen=True, slots=True)
class OverflowSlot(_SlotBase):
    """A junction slot with more than two coordinates.

    Multi-site events of this shape are not fully modeled; parsers only
    use the first coordinate.
    """

    sites: tuple[int, ...] = attrs.field(converter=tuple)

    @property
    def values(self) -> tuple[int, ...]:
        return self.sites


Slot = Union[EmptySlot, OneSlot, TwoSlot, OverflowSlot]

EMPTY_SLOT = EmptySlot()


def make_slot(values: Sequence[int]) -> Slot:
    """Build the slot variant matching the number of coordinates.

    Args:
        values: Coordinates found in one junction token group.

    Returns:
        EmptySlot, OneSlot, TwoSlot or OverflowSlot.
    """
    if len(values) == 0:
        return EMPTY_SLOT
    if len(values) == 1:
        return OneSlot(values[0])
    if len(values) == 2:
        return TwoSlot(values[0], values[1])
    return OverflowSlot(values)


def _check_four_slots(instance: JunctionSlots, attribute: attrs.Attribute, value: tuple) -> None:
    if len(value) != 4:
        raise ValueError(f"Expected 4 junction slots, got {len(value)}")


@attrs.define(frozen=True, slots=True)
class JunctionSlots:
    """The four numeric junction slots of an event, in source order.

    Indexing is 0-based: ``slots[0]`` is the first junction after the
    chromosome.
    """

    slots: tuple[Slot, ...] = attrs.field(converter=tuple, validator=_check_four_slots)

    @classmethod
    def from_values(cls, *groups: Sequence[int]) -> JunctionSlots:
        """Build slots from coordinate groups, padding to four with empty slots."""
        built = [make_slot(group) for group in groups[:4]]
        built.extend(EMPTY_SLOT for _ in range(4 - len(built)))
        return cls(built)

    def __getitem__(self, index: int) -> Slot:
        return self.slots[index]

    def __iter__(self):
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)


# =============================================================================
# Event Records
# =============================================================================


@attrs.define(frozen=True, slots=True)
class Boundaries:
    """Exon boundary coordinates of an event.

    All fields are optional; fields that do not apply to an event type
    stay None.
    """

    c1_start: int | None = None
    c1_end: int | None = None
    a1_start: int | None = None
    a1_end: int | None = None
    a2_start: int | None = None
    a2_end: int | None = None
    c2_start: int | None = None
    c2_end: int | None = None

    def as_tuple(self) -> tuple[int | None, ...]:
        """Boundaries in output column order."""
        return attrs.astuple(self)


def _parse_inclusion(value: object) -> float | None:
    """Convert an inclusion level cell to float, None when missing."""
    if value is None:
        return None
    text = str(value).strip()
    if text in MISSING_VALUES:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return None if math.isnan(number) else number


@attrs.define(frozen=True, slots=True)
class RawEvent:
    """One event row as emitted by VAST-TOOLS.

    Attributes:
        gene_symbol: Gene symbol (column 1).
        event_id: Event identifier (column 2).
        coordinates: Packed chromosome and junction coordinates (column 5).
        event_type_code: Raw event type code (column 6).
        inclusion_levels: Inclusion levels from columns 7 and 9. Length
            records how many the row supplied (0, 1 or 2).
    """

    gene_symbol: str = attrs.field(converter=str)
    event_id: str = attrs.field(converter=str)
    coordinates: str = attrs.field(converter=str)
    event_type_code: str = attrs.field(converter=str)
    inclusion_levels: tuple[float | None, ...] = attrs.field(
        default=(), converter=tuple
    )

    @classmethod
    def from_columns(cls, columns: Sequence[object]) -> RawEvent:
        """Build a RawEvent from positional row columns.

        Columns 3, 4 and 8 are not used. Inclusion level A is read when
        the row has at least 7 columns and inclusion level B when it has
        at least 9.

        Args:
            columns: Row cells in source order.

        Returns:
            RawEvent for the row.

        Raises:
            EventFormatError: If the row has fewer than 6 columns.
        """
        if len(columns) < MIN_COLUMNS:
            raise EventFormatError(
                f"Event row has {len(columns)} columns; at least {MIN_COLUMNS} "
                "are needed (gene, event ID, ..., coordinates, event type)"
            )

        inclusion: list[float | None] = []
        if len(columns) > COL_INCLUSION_A:
            inclusion.append(_parse_inclusion(columns[COL_INCLUSION_A]))
        if len(columns) > COL_INCLUSION_B:
            inclusion.append(_parse_inclusion(columns[COL_INCLUSION_B]))

        return cls(
            gene_symbol=columns[COL_GENE_SYMBOL],
            event_id=columns[COL_EVENT_ID],
            coordinates=str(columns[COL_COORDINATES]).strip(),
            event_type_code=str(columns[COL_EVENT_TYPE]).strip(),
            inclusion_levels=tuple(inclusion),
        )

    @classmethod
    def from_line(cls, line: str, sep: str | None = None) -> RawEvent:
        """Build a RawEvent from one text row.

        Args:
            line: Row text.
            sep: Column separator. Splits on runs of whitespace if None.

        Returns:
            RawEvent for the row.
        """
        return cls.from_columns(line.rstrip("\r\n").split(sep))


@attrs.define(frozen=True, slots=True)
class NormalizedEvent:
    """A splicing event with explicit boundaries and strand.

    Attributes:
        gene_symbol: Gene symbol, copied verbatim.
        event_id: Event identifier, copied verbatim.
        event_type: Resolved event type.
        chromosome: Chromosome label from the coordinate field.
        strand: Strand (+ or -).
        boundaries: Exon boundary coordinates.
        inclusion_levels: Inclusion levels carried over from the source row.
        program: Tool that produced the source row.
    """

    gene_symbol: str
    event_id: str
    event_type: EventType
    chromosome: str
    strand: Strand
    boundaries: Boundaries = attrs.Factory(Boundaries)
    inclusion_levels: tuple[float | None, ...] = attrs.field(default=(), converter=tuple)
    program: str = PROGRAM_VAST_TOOLS

    @property
    def inclusion_a(self) -> float | None:
        return self.inclusion_levels[0] if len(self.inclusion_levels) > 0 else None

    @property
    def inclusion_b(self) -> float | None:
        return self.inclusion_levels[1] if len(self.inclusion_levels) > 1 else None

    @property
    def c1_start(self) -> int | None:
        return self.boundaries.c1_start

    @property
    def c1_end(self) -> int | None:
        return self.boundaries.c1_end

    @property
    def a1_start(self) -> int | None:
        return self.boundaries.a1_start

    @property
    def a1_end(self) -> int | None:
        return self.boundaries.a1_end

    @property
    def a2_start(self) -> int | None:
        return self.boundaries.a2_start

    @property
    def a2_end(self) -> int | None:
        return self.boundaries.a2_end

    @property
    def c2_start(self) -> int | None:
        return self.boundaries.c2_start

    @property
    def c2_end(self) -> int | None:
        return self.boundaries.c2_end
