"""Normalization of VAST-TOOLS splicing events.

The dispatcher resolves an event's type from its raw code, tokenizes the
coordinate field, hands the junction slots to the parser for that type
and merges the result with the event's identity into a NormalizedEvent.

Parsing is permissive: content problems never raise. They leave
boundary fields empty and are reported as ParseFlags by the
``*_with_diagnostics`` functions.

Example:
    >>> from splicenorm.core.events import parse_event
    >>> from splicenorm.core.models import RawEvent
    >>> raw = RawEvent.from_line(
    ...     "NFYA HsaEX0042823 chr6:41046768-41046903 136 "
    ...     "chr6:41040823,41046768-41046903,41051785 C2 0 N 0 N"
    ... )
    >>> event = parse_event(raw)
    >>> event.event_type, event.strand, event.c1_end
    (<EventType.SE: 'SE'>, '+', 41040823)
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable

import attrs

from splicenorm.core.flags import ParseFlag, ParseFlags
from splicenorm.core.junctions import (
    JUNCTION_PARSERS,
    ParsedJunctions,
    parse_ri,
    read_trailing_strand,
    tokenize_coordinates,
)
from splicenorm.core.models import (
    PROGRAM_VAST_TOOLS,
    EventType,
    NormalizedEvent,
    RawEvent,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

# Raw VAST-TOOLS type codes; any other code is parsed as a skipped exon
EVENT_TYPE_CODES: dict[str, EventType] = {
    "IR-C": EventType.RI,
    "IR-S": EventType.RI,
    "Alt3": EventType.A3SS,
    "Alt5": EventType.A5SS,
}

DEFAULT_EVENT_TYPE = EventType.SE

# Exon codes VAST-TOOLS writes for cassette and microexon events
EXON_EVENT_CODES = frozenset({"S", "C1", "C2", "C3", "MIC", "ANN"})

DEFAULT_PROGRESS_INTERVAL = 1000


# =============================================================================
# Data Structures
# =============================================================================


@attrs.define(frozen=True, slots=True)
class ParseResult:
    """A normalized event with the diagnostics raised while parsing it.

    Attributes:
        event: The normalized event.
        flags: Diagnostics for this row.
    """

    event: NormalizedEvent
    flags: frozenset[ParseFlag] = frozenset()

    @property
    def is_clean(self) -> bool:
        """True if parsing raised no flags."""
        return not self.flags


# =============================================================================
# Event Type Resolution
# =============================================================================


def resolve_event_type(code: str) -> EventType:
    """Map a raw VAST-TOOLS type code to an event type.

    ``IR-C`` and ``IR-S`` map to RI, ``Alt3`` to A3SS and ``Alt5`` to
    A5SS. Every other code maps to SE: the exon codes (``S``, ``C1``,
    ``C2``, ``C3``, ``MIC``, ``ANN``) and, as a fallback, unknown codes.

    Use is_recognized_event_type to tell the fallback apart from a
    known code.

    Args:
        code: Raw type code.

    Returns:
        Resolved EventType.
    """
    return EVENT_TYPE_CODES.get(str(code).strip(), DEFAULT_EVENT_TYPE)


def is_recognized_event_type(code: str) -> bool:
    """Check whether a raw type code is a known VAST-TOOLS code."""
    code = str(code).strip()
    return code in EVENT_TYPE_CODES or code in EXON_EVENT_CODES


# =============================================================================
# Dispatcher
# =============================================================================


def parse_event_with_diagnostics(
    raw: RawEvent,
    program: str = PROGRAM_VAST_TOOLS,
) -> ParseResult:
    """Normalize one raw event and report how it was degraded.

    Args:
        raw: Raw event row.
        program: Program name stored on the event.

    Returns:
        ParseResult with the event and its flags.
    """
    flags: set[ParseFlag] = set()

    event_type = resolve_event_type(raw.event_type_code)
    if not is_recognized_event_type(raw.event_type_code):
        logger.debug(
            f"Event {raw.event_id}: type code '{raw.event_type_code}' parsed as "
            f"{DEFAULT_EVENT_TYPE.value}"
        )
        flags.add(ParseFlags.UNRECOGNIZED_EVENT_TYPE)

    tokens = tokenize_coordinates(raw.coordinates)
    flags.update(tokens.flags)

    parsed: ParsedJunctions
    if event_type is EventType.RI:
        strand, recognized = read_trailing_strand(raw.coordinates)
        if not recognized:
            logger.debug(
                f"Event {raw.event_id}: no strand at end of '{raw.coordinates}', using '-'"
            )
            flags.add(ParseFlags.UNRESOLVED_STRAND)
        parsed = parse_ri(tokens.junctions, strand)
    else:
        parsed = JUNCTION_PARSERS[event_type](tokens.junctions)
    flags.update(parsed.flags)

    event = NormalizedEvent(
        gene_symbol=raw.gene_symbol,
        event_id=raw.event_id,
        event_type=event_type,
        chromosome=tokens.chromosome,
        strand=parsed.strand,
        boundaries=parsed.boundaries,
        inclusion_levels=raw.inclusion_levels,
        program=program,
    )
    return ParseResult(event, frozenset(flags))


def parse_event(raw: RawEvent, program: str = PROGRAM_VAST_TOOLS) -> NormalizedEvent:
    """Normalize one raw event.

    Args:
        raw: Raw event row.
        program: Program name stored on the event.

    Returns:
        The NormalizedEvent.
    """
    return parse_event_with_diagnostics(raw, program=program).event


# =============================================================================
# Batch Parsing
# =============================================================================


def parse_events_with_diagnostics(
    raws: Iterable[RawEvent],
    max_workers: int = 1,
    program: str = PROGRAM_VAST_TOOLS,
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
) -> list[ParseResult]:
    """Normalize many raw events, one result per row in input order.

    Rows are independent. With more than one worker they are parsed
    on a thread pool and put back in input order.

    Args:
        raws: Raw event rows.
        max_workers: Number of worker threads.
        program: Program name stored on each event.
        progress_interval: Rows between progress log messages.

    Returns:
        List of ParseResult, same length and order as the input.
    """
    raw_list = list(raws)
    n_rows = len(raw_list)

    if max_workers <= 1 or n_rows <= 1:
        results = []
        for i, raw in enumerate(raw_list, start=1):
            results.append(parse_event_with_diagnostics(raw, program=program))
            if progress_interval > 0 and i % progress_interval == 0:
                logger.debug(f"Parsed {i}/{n_rows} events")
        return results

    ordered: list[ParseResult | None] = [None] * n_rows
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(parse_event_with_diagnostics, raw, program): i
            for i, raw in enumerate(raw_list)
        }

        for done, future in enumerate(as_completed(futures), start=1):
            ordered[futures[future]] = future.result()
            if progress_interval > 0 and done % progress_interval == 0:
                logger.debug(f"Parsed {done}/{n_rows} events")

    return [result for result in ordered if result is not None]


def parse_events(
    raws: Iterable[RawEvent],
    max_workers: int = 1,
    program: str = PROGRAM_VAST_TOOLS,
) -> list[NormalizedEvent]:
    """Normalize many raw events, one event per row in input order.

    Args:
        raws: Raw event rows.
        max_workers: Number of worker threads.
        program: Program name stored on each event.

    Returns:
        List of NormalizedEvent, same length and order as the input.
    """
    results = parse_events_with_diagnostics(raws, max_workers=max_workers, program=program)
    return [result.event for result in results]
