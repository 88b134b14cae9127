#!/usr/bin/env python3
"""Fetch a club's squad from Transfermarkt and print it as JSON."""

import sys
import json
import logging

from dotenv import load_dotenv

sys.path.append('.')
load_dotenv()

from backend.scraper.squad_scraper import scrape_squad

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(levelname)s: %(message)s'
)


def main():
    """Main entry point."""
    args = [arg for arg in sys.argv[1:] if not arg.startswith("--")]
    if not args:
        print("Usage: python scripts/fetch_squad.py CLUB_ID [--strict]")
        print("  CLUB_ID: Transfermarkt club ID (e.g. 614)")
        print("  --strict: fail on the first malformed row")
        sys.exit(1)

    club_id = args[0]
    strict = "--strict" in sys.argv[1:]

    result = scrape_squad(club_id, strict=strict)
    if not result.ok:
        print(f"Error: {result.error}")
        sys.exit(1)

    print(json.dumps(
        [player.to_json_dict() for player in result.players],
        ensure_ascii=False,
        indent=2
    ))
    print(
        f"\nCompleted: Scraped {len(result.players)} players "
        f"({result.skipped_rows} rows skipped)",
        file=sys.stderr
    )


if __name__ == "__main__":
    main()
