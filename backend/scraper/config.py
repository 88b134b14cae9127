# backend/scraper/config.py
"""Configuration and constants for scraping."""

import os

# HTTP Configuration
REQUEST_TIMEOUT = float(os.getenv("TM_REQUEST_TIMEOUT", "30.0"))
MAX_RETRIES = int(os.getenv("TM_MAX_RETRIES", "1"))  # 1 = single attempt
RETRY_BACKOFF_BASE = 2  # Exponential: 1s, 2s, 4s
USER_AGENT = os.getenv(
    "TM_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

# Transfermarkt URLs
TRANSFERMARKT_BASE_URL = os.getenv(
    "TRANSFERMARKT_BASE_URL", "https://www.transfermarkt.com.br"
).rstrip("/")
SQUAD_URL_TEMPLATE = f"{TRANSFERMARKT_BASE_URL}/club/kader/verein/{{club_id}}/plus/1"

# Squad table rows (zebra striped)
SQUAD_ROW_SELECTOR = "table.items tbody tr.odd, table.items tbody tr.even"

# Sentinel rendered for missing values
NOT_AVAILABLE = "N/A"

# Marker icons inside a row
INJURY_CLASS = "verletzt-table"
CAPTAIN_CLASS = "kapitaenicon-table"
SUSPENSION_CLASS = "ausfall-1-table"

# Market value units; only "mi." is millions, anything else matched is thousands
MILLIONS_UNIT = "mi."
MILLIONS = 1_000_000
THOUSANDS = 1_000
