"""Junction coordinate parsing for VAST-TOOLS events.

VAST-TOOLS packs an event's junctions into one coordinate field, e.g.
``chr6:41040823,41046768-41046903,41051785``. Tokens are separated by
``:``, ``,``, ``-`` or ``=``; alternative sites inside one token are
joined with ``+`` (``chr1:36276385,36277798+36277315-36277974``).

The first token is the chromosome. The following tokens become four
junction slots, each holding zero, one, two or more coordinates. One
parser per event type maps the slots to exon boundaries:

- SE: strand from comparing the first and last slot
- RI: strand read from the coordinate field's last character
- A3SS: strand from comparing slot 1 against slot 3 (or slot 2)
- A5SS: strand from comparing slot 2 (or slot 1) against slot 3

On the minus strand the slot order is reversed relative to the
transcript, so each parser mirrors its mapping.

Example:
    >>> from splicenorm.core.junctions import tokenize_coordinates, parse_se
    >>> tokens = tokenize_coordinates("chr6:41040823,41046768-41046903,41051785")
    >>> parsed = parse_se(tokens.junctions)
    >>> parsed.strand
    '+'
"""

from __future__ import annotations

import logging
import re
from typing import Callable

import attrs

from splicenorm.core.flags import ParseFlag, ParseFlags
from splicenorm.core.models import (
    EMPTY_SLOT,
    Boundaries,
    EmptySlot,
    EventType,
    JunctionSlots,
    OneSlot,
    OverflowSlot,
    Slot,
    Strand,
    TwoSlot,
    make_slot,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

_TOKEN_SEPARATORS = re.compile(r"[:,\-=]")
SITE_SEPARATOR = "+"
N_SLOTS = 4


# =============================================================================
# Data Structures
# =============================================================================


@attrs.define(frozen=True, slots=True)
class TokenizedCoordinates:
    """A coordinate field split into chromosome and junction slots.

    Attributes:
        chromosome: Chromosome label (first token).
        junctions: The four numeric junction slots.
        flags: Diagnostics raised while tokenizing.
    """

    chromosome: str
    junctions: JunctionSlots
    flags: frozenset[ParseFlag] = frozenset()


@attrs.define(frozen=True, slots=True)
class ParsedJunctions:
    """Output of a junction parser.

    Attributes:
        strand: Resolved strand.
        boundaries: Exon boundaries mapped from the slots.
        flags: Diagnostics raised while mapping.
    """

    strand: Strand
    boundaries: Boundaries
    flags: frozenset[ParseFlag] = frozenset()


# =============================================================================
# Tokenizer
# =============================================================================


def split_coordinates(coordinates: str) -> list[str]:
    """Split a coordinate field into raw token groups.

    Trailing empty tokens are dropped. Empty tokens inside the field are
    kept in place so that later groups stay in their own slots.

    Args:
        coordinates: Packed coordinate field.

    Returns:
        Token groups; the first is the chromosome.
    """
    tokens = _TOKEN_SEPARATORS.split(coordinates.strip())
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens


def parse_slot(token: str) -> tuple[Slot, bool]:
    """Parse one token group into a junction slot.

    An empty token gives an empty slot. Values that are not integers are
    dropped.

    Args:
        token: Token group, possibly holding ``+``-joined sites.

    Returns:
        Tuple of (slot, malformed) where malformed is True if any value
        was dropped.
    """
    values: list[int] = []
    malformed = False
    for site in token.split(SITE_SEPARATOR):
        if not site:
            continue
        try:
            values.append(int(site))
        except ValueError:
            malformed = True
    return make_slot(values), malformed


def tokenize_coordinates(coordinates: str) -> TokenizedCoordinates:
    """Tokenize a coordinate field into chromosome and four junction slots.

    Only the first four groups after the chromosome are used; fewer
    groups are padded with empty slots.

    Args:
        coordinates: Packed coordinate field.

    Returns:
        TokenizedCoordinates for the field.
    """
    tokens = split_coordinates(coordinates)
    chromosome = tokens[0] if tokens else ""
    flags: set[ParseFlag] = set()

    slots: list[Slot] = []
    for token in tokens[1 : N_SLOTS + 1]:
        slot, malformed = parse_slot(token)
        if malformed:
            logger.debug(f"Dropped non-numeric coordinate in '{token}' ({coordinates})")
            flags.add(ParseFlags.MALFORMED_TOKEN)
        slots.append(slot)

    if len(slots) < N_SLOTS:
        logger.debug(f"Padding {N_SLOTS - len(slots)} empty slot(s) for '{coordinates}'")
        flags.add(ParseFlags.PADDED_SLOTS)
        slots.extend(EMPTY_SLOT for _ in range(N_SLOTS - len(slots)))

    return TokenizedCoordinates(chromosome, JunctionSlots(slots), frozenset(flags))


def read_trailing_strand(coordinates: str) -> tuple[Strand, bool]:
    """Read the strand encoded as the last character of a coordinate field.

    Args:
        coordinates: Packed coordinate field of an intron retention event.

    Returns:
        Tuple of (strand, recognized). Any character other than ``+``
        reads as ``-``; recognized is False unless it was ``+`` or ``-``.
    """
    last = coordinates.strip()[-1:]
    if last == "+":
        return "+", True
    return "-", last == "-"


# =============================================================================
# Strand Inference
# =============================================================================


def _is_before(left: int | None, right: int | None) -> tuple[bool, bool]:
    """Compare two coordinates.

    Returns:
        Tuple of (left < right, comparable). A missing operand compares
        as False.
    """
    if left is None or right is None:
        return False, False
    return left < right, True


def _strand(plus: bool) -> Strand:
    return "+" if plus else "-"


# =============================================================================
# Alternative Pair Helpers
# =============================================================================


def _alternative_pair(slot: Slot) -> tuple[int | None, int | None, bool]:
    """Split the slot holding two alternative sites into (A1, A2).

    Returns:
        Tuple of (a1, a2, oversized). Oversized slots keep only the
        first site, assigned to A2.
    """
    match slot:
        case EmptySlot():
            return None, None, False
        case OneSlot(value):
            # A single site fills A1 only; A2 stays unknown
            return value, None, False
        case TwoSlot(left, right):
            return left, right, False
        case OverflowSlot(sites):
            return None, sites[0], True
    raise TypeError(f"Unknown slot type: {type(slot).__name__}")


# =============================================================================
# Junction Parsers
# =============================================================================


def parse_se(junctions: JunctionSlots) -> ParsedJunctions:
    """Parse skipped exon junctions.

    Strand is plus if the first junction precedes the last one. C1.end
    and C2.start are the first and last junctions on both strands; the
    middle two are swapped on the minus strand.

    Args:
        junctions: Four single-valued junction slots.

    Returns:
        ParsedJunctions with C1.end, A1.start, A1.end and C2.start.
    """
    s1, s2, s3, s4 = (slot.first for slot in junctions)
    plus, comparable = _is_before(s1, s4)
    flags = frozenset() if comparable else frozenset({ParseFlags.UNRESOLVED_STRAND})

    if plus:
        a1_start, a1_end = s2, s3
    else:
        a1_start, a1_end = s3, s2

    boundaries = Boundaries(c1_end=s1, a1_start=a1_start, a1_end=a1_end, c2_start=s4)
    return ParsedJunctions(_strand(plus), boundaries, flags)


def parse_ri(junctions: JunctionSlots, strand: Strand) -> ParsedJunctions:
    """Parse intron retention junctions.

    The strand is not inferred from coordinates. On the minus strand
    the start and end of each flanking exon are swapped.

    Args:
        junctions: Four single-valued junction slots.
        strand: Strand read from the coordinate field.

    Returns:
        ParsedJunctions with C1 and C2 start and end.
    """
    s1, s2, s3, s4 = (slot.first for slot in junctions)

    if strand == "+":
        boundaries = Boundaries(c1_start=s1, c1_end=s2, c2_start=s3, c2_end=s4)
    else:
        boundaries = Boundaries(c1_start=s2, c1_end=s1, c2_start=s4, c2_end=s3)
    return ParsedJunctions(strand, boundaries)


def parse_a3ss(junctions: JunctionSlots) -> ParsedJunctions:
    """Parse alternative 3' splice site junctions.

    Slot 1 is the donor of the upstream exon. Slots 2 and 3 hold the
    alternative acceptors and the downstream junction; which is which
    depends on the strand. Slot 4 is not used.

    Strand is plus if slot 1 precedes the first site of slot 3, or of
    slot 2 when slot 3 is empty.

    Args:
        junctions: Junction slots of the event.

    Returns:
        ParsedJunctions with C1.end, A1.start, A2.start and A2.end.
    """
    slot1, slot2, slot3 = junctions[0], junctions[1], junctions[2]
    reference = slot3 if len(slot3) > 0 else slot2
    plus, comparable = _is_before(slot1.first, reference.first)
    flags: set[ParseFlag] = set()
    if not comparable:
        flags.add(ParseFlags.UNRESOLVED_STRAND)

    if plus:
        acceptors, downstream = slot2, slot3
    else:
        acceptors, downstream = slot3, slot2

    a1_start, a2_start, oversized = _alternative_pair(acceptors)
    if oversized:
        logger.debug(f"A3SS acceptor slot has {len(acceptors)} sites; keeping the first")
        flags.add(ParseFlags.OVERSIZED_SLOT)

    boundaries = Boundaries(
        c1_end=slot1.first,
        a1_start=a1_start,
        a2_start=a2_start,
        a2_end=downstream.first,
    )
    return ParsedJunctions(_strand(plus), boundaries, frozenset(flags))


def parse_a5ss(junctions: JunctionSlots) -> ParsedJunctions:
    """Parse alternative 5' splice site junctions.

    Slot 3 is the acceptor of the downstream exon. Slots 1 and 2 hold the
    upstream junction and the alternative donors; which is which depends
    on the strand. Slot 4 is not used.

    Strand is plus if the first site of slot 2 (or of slot 1 when slot 2
    is empty) precedes slot 3.

    Args:
        junctions: Junction slots of the event.

    Returns:
        ParsedJunctions with A2.start, A1.end, A2.end and C2.start.
    """
    slot1, slot2, slot3 = junctions[0], junctions[1], junctions[2]
    reference = slot2 if len(slot2) > 0 else slot1
    plus, comparable = _is_before(reference.first, slot3.first)
    flags: set[ParseFlag] = set()
    if not comparable:
        flags.add(ParseFlags.UNRESOLVED_STRAND)

    if plus:
        upstream, donors = slot1, slot2
    else:
        upstream, donors = slot2, slot1

    a1_end, a2_end, oversized = _alternative_pair(donors)
    if oversized:
        logger.debug(f"A5SS donor slot has {len(donors)} sites; keeping the first")
        flags.add(ParseFlags.OVERSIZED_SLOT)

    boundaries = Boundaries(
        a2_start=upstream.first,
        a1_end=a1_end,
        a2_end=a2_end,
        c2_start=slot3.first,
    )
    return ParsedJunctions(_strand(plus), boundaries, frozenset(flags))


# Parsers that infer strand from coordinates; RI takes the strand as input
JUNCTION_PARSERS: dict[EventType, Callable[[JunctionSlots], ParsedJunctions]] = {
    EventType.SE: parse_se,
    EventType.A3SS: parse_a3ss,
    EventType.A5SS: parse_a5ss,
}
