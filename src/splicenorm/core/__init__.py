"""Core event normalization for splicenorm.

This module contains the data model and the parsing logic:

- Event and junction slot models
- Junction parsers for SE, RI, A5SS and A3SS events
- The event dispatcher and batch parsing
- Parse diagnostics
- Tabular output records

Example:
    >>> from splicenorm.core import RawEvent, parse_event
    >>> event = parse_event(RawEvent.from_line(line))
"""

from splicenorm.core.events import (
    ParseResult,
    is_recognized_event_type,
    parse_event,
    parse_event_with_diagnostics,
    parse_events,
    parse_events_with_diagnostics,
    resolve_event_type,
)
from splicenorm.core.flags import FlagSeverity, ParseFlag, ParseFlags
from splicenorm.core.models import (
    Boundaries,
    EventFormatError,
    EventType,
    JunctionSlots,
    NormalizedEvent,
    RawEvent,
)
from splicenorm.core.table import event_columns, event_to_record, events_to_records

__all__: list[str] = [
    # Models
    "Boundaries",
    "EventFormatError",
    "EventType",
    "JunctionSlots",
    "NormalizedEvent",
    "RawEvent",
    # Parsing
    "ParseResult",
    "is_recognized_event_type",
    "parse_event",
    "parse_event_with_diagnostics",
    "parse_events",
    "parse_events_with_diagnostics",
    "resolve_event_type",
    # Diagnostics
    "FlagSeverity",
    "ParseFlag",
    "ParseFlags",
    # Output
    "event_columns",
    "event_to_record",
    "events_to_records",
]
