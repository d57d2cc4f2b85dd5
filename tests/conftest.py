"""Pytest configuration and shared fixtures for splicenorm tests.

Fixtures are organized by category:

- Row fixtures: raw VAST-TOOLS event rows as text
- Event fixtures: RawEvent objects built from those rows
"""

import pytest

from splicenorm.core.models import RawEvent


# =============================================================================
# Row Fixtures
# =============================================================================


@pytest.fixture
def se_row() -> str:
    """Skipped exon row with inclusion levels for both samples."""
    return (
        "NFYA HsaEX0042823 chr6:41046768-41046903 136 "
        "chr6:41040823,41046768-41046903,41051785 C2 0 N 0 N"
    )


@pytest.fixture
def se_minus_row() -> str:
    """Skipped exon row whose junctions run from high to low coordinates."""
    return (
        "GENE2 HsaEX0000002 chr2:58864693-58864294 400 "
        "chr2:58864658,58864693-58864294,58864563 S 12.5 N 80 N"
    )


@pytest.fixture
def ri_plus_row() -> str:
    """Intron retention row on the plus strand."""
    return "GENE3 HsaINT0000003 chr3:200-300 100 chr3:100-200=300-400:+ IR-C 5 N 7 N"


@pytest.fixture
def ri_minus_row() -> str:
    """Intron retention row on the minus strand."""
    return "GENE4 HsaINT0000004 chr4:200-300 100 chr4:100-200=300-400:- IR-S 5 N 7 N"


@pytest.fixture
def a3ss_row() -> str:
    """Alternative 3' splice site row with two acceptors on the plus strand."""
    return (
        "GENE5 HsaALTA0000005 chr1:36277315-36277798 483 "
        "chr1:36276385,36277798+36277315-36277974 Alt3 NA N 40 N"
    )


@pytest.fixture
def a5ss_row() -> str:
    """Alternative 5' splice site row with two donors on the plus strand."""
    return (
        "GENE6 HsaALTD0000006 chr2:74650654-74650658 4 "
        "chr2:74650610,74650654+74650658-74650982 Alt5 33 N 66 N"
    )


# =============================================================================
# Event Fixtures
# =============================================================================


@pytest.fixture
def se_event(se_row: str) -> RawEvent:
    return RawEvent.from_line(se_row)


@pytest.fixture
def mixed_events(se_row, se_minus_row, ri_plus_row, ri_minus_row, a3ss_row, a5ss_row) -> list[RawEvent]:
    """One raw event of every type, in a fixed order."""
    rows = [se_row, se_minus_row, ri_plus_row, ri_minus_row, a3ss_row, a5ss_row]
    return [RawEvent.from_line(row) for row in rows]
