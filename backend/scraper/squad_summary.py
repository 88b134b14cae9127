# backend/scraper/squad_summary.py
"""Tabular view and summary statistics of a scraped squad."""

import polars as pl

from backend.scraper.models import Player
from backend.scraper.schemas import SQUAD_SCHEMA


def _to_int(value: str | None) -> int | None:
    return int(value) if value and value.isdigit() else None


def squad_to_frame(players: list[Player]) -> pl.DataFrame:
    """
    Flatten players into a DataFrame.

    Args:
        players: Scraped players

    Returns:
        DataFrame with SQUAD_SCHEMA columns, empty if no players
    """
    rows = [
        {
            "player_id": p.id,
            "name": p.name,
            "position": p.position,
            "shirt_number": p.shirt_number,
            "date_of_birth": p.date_of_birth,
            "age": _to_int(p.age),
            "nationality": ", ".join(p.nationality),
            "height": p.height,
            "foot": p.foot,
            "injury": p.injury,
            "captain": p.captain,
            "suspension": p.suspension,
            "joined": p.joined,
            "contract_until": p.contract_until,
            "market_value": p.market_value.value,
            "currency": p.market_value.currency,
            "last_club_id": p.last_club.signed_from_club_id if p.last_club else None,
            "on_loan": p.additional_information is not None,
        }
        for p in players
    ]
    return pl.DataFrame(rows, schema=SQUAD_SCHEMA)


def summarize_squad(df: pl.DataFrame) -> dict:
    """
    Compute headline numbers for a squad.

    Returns:
        Dict with player count, market value totals, average age,
        players per position and availability counts
    """
    if len(df) == 0:
        return {
            "players": 0,
            "total_market_value": 0.0,
            "average_market_value": 0.0,
            "average_age": None,
            "positions": {},
            "injured": 0,
            "suspended": 0,
            "on_loan": 0,
        }

    positions = (
        df.group_by("position")
        .agg(pl.len().alias("count"))
        .sort(["count", "position"], descending=[True, False])
    )

    return {
        "players": len(df),
        "total_market_value": float(df["market_value"].sum()),
        "average_market_value": float(df["market_value"].mean()),
        "average_age": df["age"].mean(),
        "positions": {
            row["position"]: row["count"]
            for row in positions.iter_rows(named=True)
        },
        "injured": int(df["injury"].sum()),
        "suspended": int(df["suspension"].sum()),
        "on_loan": int(df["on_loan"].sum()),
    }
