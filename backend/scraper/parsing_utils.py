# backend/scraper/parsing_utils.py
"""Parsing helpers for locale-formatted squad table values."""

import re

from backend.scraper.config import MILLIONS, MILLIONS_UNIT, THOUSANDS
from backend.scraper.models import MarketValue

MARKET_VALUE_PATTERN = re.compile(
    r'(\d{1,3}(?:\.\d{3})*(?:,\d{2})?)\s*(mil|mi\.?)\s*([€$£])'
)
BIRTH_AGE_PATTERN = re.compile(r'^(\d{2}/\d{2}/\d{4}) \((\d{2})\)$')
HEIGHT_PATTERN = re.compile(r'\d,\d{2}')
CLUB_ID_PATTERN = re.compile(r'verein/(\d+)')
PLAYER_PATH_MARKER = "spieler/"


def parse_market_value(text: str | None) -> MarketValue:
    """
    Parse a market value such as '4,00 mi. €' or '500 mil €'.

    Args:
        text: Market value cell text

    Returns:
        MarketValue, zero with no currency when the text does not match
    """
    if not text:
        return MarketValue()

    match = MARKET_VALUE_PATTERN.search(text)
    if not match:
        return MarketValue()

    amount, unit, currency = match.groups()
    number = float(amount.replace(".", "").replace(",", "."))
    multiplier = MILLIONS if unit == MILLIONS_UNIT else THOUSANDS
    return MarketValue(value=round(number * multiplier, 2), currency=currency)


def parse_height(text: str | None) -> str | None:
    """Extract height like '1,99' (meters, comma decimal)."""
    if text and (match := HEIGHT_PATTERN.search(text)):
        return match.group(0)
    return None


def parse_birth_and_age(text: str) -> tuple[str, str]:
    """
    Split a 'DD/MM/YYYY (AA)' cell into date of birth and age.

    Raises:
        ValueError: If the text does not match
    """
    match = BIRTH_AGE_PATTERN.match(text.strip())
    if not match:
        raise ValueError(f"Unexpected date of birth format: {text!r}")
    return match.group(1), match.group(2)


def extract_player_id(href: str | list | None) -> str | None:
    """
    Extract player ID from a Transfermarkt profile href.

    Args:
        href: URL or href attribute

    Returns:
        Player ID or None
    """
    if not isinstance(href, str):
        return None
    _, marker, player_id = href.partition(PLAYER_PATH_MARKER)
    return player_id if marker and player_id else None


def extract_club_id(href: str | list | None) -> str | None:
    """Extract club ID from a '/verein/<id>' href."""
    if not isinstance(href, str):
        return None
    match = CLUB_ID_PATTERN.search(href)
    return match.group(1) if match else None
