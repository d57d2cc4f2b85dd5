"""splicenorm: Normalize alternative splicing events from VAST-TOOLS.

splicenorm turns raw VAST-TOOLS event rows into typed records with
explicit exon boundaries and strand, so events can be compared and
aggregated across tools and samples.

Example:
    >>> import splicenorm
    >>> splicenorm.__version__
    '0.1.0'

Modules:
    core: Event models, junction parsers, dispatcher and output records
    config: Configuration
    utils: Logging utilities
    cli: Command-line interface
"""

__version__ = "0.1.0"

from splicenorm.core import (
    EventType,
    NormalizedEvent,
    RawEvent,
    parse_event,
    parse_events,
)

__all__ = [
    "__version__",
    "EventType",
    "NormalizedEvent",
    "RawEvent",
    "parse_event",
    "parse_events",
]
