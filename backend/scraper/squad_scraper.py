# backend/scraper/squad_scraper.py
"""Scrape a club's squad from Transfermarkt."""

import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup

from backend.scraper.config import (
    REQUEST_TIMEOUT,
    SQUAD_ROW_SELECTOR,
    SQUAD_URL_TEMPLATE,
)
from backend.scraper.http_utils import FetchError, fetch_html
from backend.scraper.models import Player
from backend.scraper.squad_parser import RowExtractionError, extract_player

logger = logging.getLogger(__name__)


@dataclass
class SquadResult:
    """Outcome of a squad scrape: the players, or the reason it failed."""

    club_id: str
    url: str
    players: list[Player] = field(default_factory=list)
    skipped_rows: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_squad_url(club_id: str) -> str:
    """Build the first squad page URL for a club."""
    return SQUAD_URL_TEMPLATE.format(club_id=club_id)


def parse_squad_html(html: str, strict: bool = False) -> tuple[list[Player], int]:
    """
    Extract all players from a squad page.

    Args:
        html: Squad page HTML
        strict: Raise on the first malformed row instead of skipping it

    Returns:
        Tuple of (players in page order, number of skipped rows)

    Raises:
        RowExtractionError: In strict mode, for the first malformed row
    """
    soup = BeautifulSoup(html, "html.parser")
    rows = soup.select(SQUAD_ROW_SELECTOR)

    if not rows:
        logger.warning("No squad rows found in page")

    players = []
    skipped = 0
    for position, row in enumerate(rows, 1):
        try:
            players.append(extract_player(row))
        except RowExtractionError as e:
            if strict:
                raise RowExtractionError(f"Row {position}: {e}") from e
            logger.warning(f"Skipping row {position}: {e}")
            skipped += 1

    return players, skipped


def scrape_squad(
    club_id: str,
    strict: bool = False,
    timeout: float = REQUEST_TIMEOUT
) -> SquadResult:
    """
    Fetch and parse a club's squad page.

    Never raises: fetch and extraction failures are reported through
    SquadResult.error.

    Args:
        club_id: Transfermarkt club ID
        strict: Fail the whole squad on the first malformed row
        timeout: Request timeout in seconds

    Returns:
        SquadResult with players in on-page order
    """
    url = build_squad_url(club_id)
    result = SquadResult(club_id=club_id, url=url)

    try:
        html = fetch_html(url, timeout=timeout)
    except FetchError as e:
        result.error = f"Fetch failed: {e}"
        return result

    try:
        players, skipped = parse_squad_html(html, strict=strict)
    except RowExtractionError as e:
        result.error = f"Extraction failed: {e}"
        return result
    except Exception as e:
        logger.exception(f"Unexpected error parsing squad for club {club_id}")
        result.error = f"Parse failed: {e}"
        return result

    result.players = players
    result.skipped_rows = skipped
    logger.info(
        f"Scraped {len(players)} players for club {club_id}"
        + (f" ({skipped} rows skipped)" if skipped else "")
    )
    return result


def fetch_squad(club_id: str) -> list[Player]:
    """
    Get a club's squad, degrading to an empty list on any failure.

    Args:
        club_id: Transfermarkt club ID

    Returns:
        List of players, empty if the squad could not be scraped
    """
    result = scrape_squad(club_id)
    if not result.ok:
        logger.error(f"Could not scrape squad for club {club_id}: {result.error}")
        return []
    return result.players
