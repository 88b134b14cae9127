# backend/scraper/schemas.py
"""Centralized schema definitions."""

import polars as pl

# Squad Schema (one row per player)
SQUAD_SCHEMA = {
    "player_id": pl.String,
    "name": pl.String,
    "position": pl.String,
    "shirt_number": pl.String,
    "date_of_birth": pl.String,
    "age": pl.Int64,
    "nationality": pl.String,
    "height": pl.String,
    "foot": pl.String,
    "injury": pl.Boolean,
    "captain": pl.Boolean,
    "suspension": pl.Boolean,
    "joined": pl.String,
    "contract_until": pl.String,
    "market_value": pl.Float64,
    "currency": pl.String,
    "last_club_id": pl.String,
    "on_loan": pl.Boolean,
}
