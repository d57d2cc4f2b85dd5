"""Tabular records for normalized events.

Column order is fixed so records from many events, tools or samples can
be concatenated directly:

    Program, Gene symbol, Event ID, Event type, Chromosome,
    [Inclusion level A, [Inclusion level B]],
    Strand, C1.start, C1.end, A1.start, A1.end, A2.start, A2.end,
    C2.start, C2.end

Inclusion columns only appear when the source row supplied them.

Example:
    >>> from splicenorm.core.events import parse_event
    >>> from splicenorm.core.models import RawEvent
    >>> from splicenorm.core.table import event_to_record
    >>> raw = RawEvent.from_line("GENE3 HsaINT0000003 chr3:200-300 100 chr3:100-200=300-400:+ IR-C")
    >>> record = event_to_record(parse_event(raw))
    >>> list(record)[:5]
    ['Program', 'Gene symbol', 'Event ID', 'Event type', 'Chromosome']
"""

from __future__ import annotations

from typing import Any, Iterable

from splicenorm.core.models import NormalizedEvent

# =============================================================================
# Constants
# =============================================================================

IDENTITY_COLUMNS = ("Program", "Gene symbol", "Event ID", "Event type", "Chromosome")
INCLUSION_COLUMNS = ("Inclusion level A", "Inclusion level B")
BOUNDARY_COLUMNS = (
    "Strand",
    "C1.start",
    "C1.end",
    "A1.start",
    "A1.end",
    "A2.start",
    "A2.end",
    "C2.start",
    "C2.end",
)


# =============================================================================
# Record Builders
# =============================================================================


def event_columns(n_inclusion: int = 0) -> tuple[str, ...]:
    """Get output columns for events carrying n inclusion levels.

    Args:
        n_inclusion: Number of inclusion levels (0, 1 or 2).

    Returns:
        Column names in output order.
    """
    n_inclusion = max(0, min(n_inclusion, len(INCLUSION_COLUMNS)))
    return IDENTITY_COLUMNS + INCLUSION_COLUMNS[:n_inclusion] + BOUNDARY_COLUMNS


def event_to_record(event: NormalizedEvent, n_inclusion: int | None = None) -> dict[str, Any]:
    """Convert an event to an ordered column -> value record.

    Args:
        event: Normalized event.
        n_inclusion: Number of inclusion columns to emit. Defaults to the
            number the event carries; extra columns are filled with None.

    Returns:
        Dict with keys in output column order.
    """
    if n_inclusion is None:
        n_inclusion = len(event.inclusion_levels)
    n_inclusion = max(0, min(n_inclusion, len(INCLUSION_COLUMNS)))

    values: list[Any] = [
        event.program,
        event.gene_symbol,
        event.event_id,
        event.event_type.value,
        event.chromosome,
    ]
    levels = list(event.inclusion_levels[:n_inclusion])
    values.extend(levels + [None] * (n_inclusion - len(levels)))
    values.append(event.strand)
    values.extend(event.boundaries.as_tuple())

    return dict(zip(event_columns(n_inclusion), values))


def events_to_records(events: Iterable[NormalizedEvent]) -> list[dict[str, Any]]:
    """Convert events to records sharing one column layout.

    The layout is the widest one across the batch so the records form a
    rectangular table.

    Args:
        events: Normalized events.

    Returns:
        List of records in input order.
    """
    event_list = list(events)
    n_inclusion = max((len(e.inclusion_levels) for e in event_list), default=0)
    return [event_to_record(event, n_inclusion) for event in event_list]


def format_value(value: Any) -> str:
    """Format a record cell for text output; missing values become NA."""
    if value is None:
        return "NA"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)
