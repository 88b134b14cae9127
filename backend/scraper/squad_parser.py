# backend/scraper/squad_parser.py
"""Extract player records from Transfermarkt squad table rows."""

from dataclasses import dataclass
from typing import Any, Callable

from bs4 import Tag

from backend.scraper.config import (
    NOT_AVAILABLE,
    INJURY_CLASS,
    CAPTAIN_CLASS,
    SUSPENSION_CLASS,
)
from backend.scraper.models import AdditionalInfo, LastClub, Player
from backend.scraper.parsing_utils import (
    extract_club_id,
    extract_player_id,
    parse_birth_and_age,
    parse_height,
    parse_market_value,
)


class RowExtractionError(Exception):
    """Raised when a required field cannot be extracted from a row."""


def _text(tag: Tag) -> str:
    """Stripped text content of an element."""
    return tag.get_text().strip()


def _attr(tag: Tag | None, name: str) -> str | None:
    """Return attribute as stripped string, None when missing."""
    if not isinstance(tag, Tag):
        return None
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip() if isinstance(value, str) else None


def _present(tag: Tag) -> bool:
    """Marker rule: the element exists."""
    return True


def _parse_birth(tag: Tag) -> tuple[str, str]:
    """Split the date of birth cell into date and age."""
    return parse_birth_and_age(_text(tag))


def _parse_nationality(cell: Tag) -> list[str]:
    """Collect flag titles in document order."""
    nationalities = []
    for img in cell.find_all("img"):
        title = img.get("title")
        if isinstance(title, str) and title and title != NOT_AVAILABLE:
            nationalities.append(title)
    return nationalities or [NOT_AVAILABLE]


def _parse_last_club(cell: Tag) -> LastClub | None:
    """Club from the signed-from cell, None when the cell is empty."""
    img = cell.find("img")
    link = cell.find("a")
    if img is None and link is None:
        return None
    return LastClub(
        signed_from_club_name=_attr(img, "title"),
        signed_from_club_id=extract_club_id(_attr(link, "href")),
        signed_from_club_image_url=_attr(img, "src"),
    )


def _parse_transfer_badge(link: Tag) -> AdditionalInfo:
    """Loan or transfer note from the badge link."""
    img = link.find("img")
    return AdditionalInfo(
        content=_attr(link, "title"),
        info_club_name=_attr(img, "title"),
        info_club_id=extract_club_id(_attr(link, "href")),
        info_club_image_url=_attr(img, "src"),
    )


@dataclass(frozen=True)
class FieldRule:
    """Where a field lives in a row and how to read it."""

    selector: str
    index: int = 0
    parse: Callable[[Tag], Any] = _text
    default: Any = None
    required: bool = False


# Indices are zero-based positions among the selector's matches in the row
FIELD_RULES: dict[str, FieldRule] = {
    "name": FieldRule(".hauptlink a"),
    "id": FieldRule(".hauptlink a", parse=lambda tag: extract_player_id(_attr(tag, "href"))),
    "position": FieldRule("td", 4),
    "shirt_number": FieldRule(".rn_nummer"),
    "image": FieldRule('td[rowspan="2"] img', parse=lambda tag: _attr(tag, "data-src")),
    "birth": FieldRule(".zentriert", 1, parse=_parse_birth, required=True),
    "nationality": FieldRule(".zentriert", 2, parse=_parse_nationality),
    "height": FieldRule(".zentriert", 3, parse=lambda tag: parse_height(_text(tag))),
    "foot": FieldRule(".zentriert", 4),
    "joined": FieldRule(".zentriert", 5),
    "last_club": FieldRule(".zentriert", 6, parse=_parse_last_club),
    "contract_until": FieldRule(".zentriert", 7),
    "market_value": FieldRule(".rechts", parse=lambda tag: parse_market_value(_text(tag))),
    "injury": FieldRule(f".{INJURY_CLASS}", parse=_present, default=False),
    "captain": FieldRule(f".{CAPTAIN_CLASS}", parse=_present, default=False),
    "suspension": FieldRule(f".{SUSPENSION_CLASS}", parse=_present, default=False),
    "additional_information": FieldRule(".wechsel-kader-wappen a", parse=_parse_transfer_badge),
}


def _apply_rule(key: str, rule: FieldRule, selections: dict[str, list[Tag]], row: Tag) -> Any:
    if rule.selector not in selections:
        selections[rule.selector] = row.select(rule.selector)
    matches = selections[rule.selector]

    if rule.index >= len(matches):
        if rule.required:
            raise RowExtractionError(f"Missing '{key}' cell ({rule.selector}[{rule.index}])")
        return rule.default

    try:
        return rule.parse(matches[rule.index])
    except ValueError as e:
        if rule.required:
            raise RowExtractionError(f"Invalid '{key}' cell: {e}") from e
        return rule.default


def extract_player(row: Tag) -> Player:
    """
    Build a Player from one squad table row.

    Args:
        row: The player's <tr> element

    Returns:
        Player record; optional fields missing from the row are left empty

    Raises:
        RowExtractionError: If a required field is missing or malformed
    """
    selections: dict[str, list[Tag]] = {}
    values = {
        key: _apply_rule(key, rule, selections, row)
        for key, rule in FIELD_RULES.items()
    }
    date_of_birth, age = values.pop("birth")
    values["nationality"] = values["nationality"] or [NOT_AVAILABLE]
    if values["market_value"] is None:
        values.pop("market_value")

    return Player(date_of_birth=date_of_birth, age=age, **values)
