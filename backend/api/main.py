# backend/api/main.py
"""FastAPI application for the Transfermarkt Squad API."""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from backend.scraper.models import Player
from backend.scraper.squad_scraper import fetch_squad

logger = logging.getLogger(__name__)

PLAYERS_ERROR_MESSAGE = "Erro ao buscar dados dos jogadores"

app = FastAPI(title="Transfermarkt Squad API", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ],
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/", response_class=PlainTextResponse)
def welcome():
    """Welcome message."""
    return "Welcome to API."


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/club/{club_id}/players", response_model=list[Player])
def get_club_players(club_id: str):
    """
    Get the current squad of a club.

    Args:
        club_id: Transfermarkt club ID

    Returns:
        List of players in squad table order, empty if the squad
        could not be scraped
    """
    try:
        return fetch_squad(club_id)
    except Exception:
        logger.exception(f"{PLAYERS_ERROR_MESSAGE} (club {club_id})")
        return JSONResponse(
            status_code=500,
            content={"message": PLAYERS_ERROR_MESSAGE}
        )
