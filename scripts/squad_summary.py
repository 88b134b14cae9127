#!/usr/bin/env python3
"""
Squad Summary Script
Fetches a club's squad and prints summary statistics.
"""

import sys
import logging

from dotenv import load_dotenv

sys.path.append('.')
load_dotenv()

import polars as pl
from backend.scraper.squad_scraper import scrape_squad
from backend.scraper.squad_summary import squad_to_frame, summarize_squad

logging.basicConfig(
    level=logging.WARNING,
    format='%(levelname)s: %(message)s'
)

def print_header(title: str):
    """Print a formatted section header."""
    print(f"\n{'=' * 80}")
    print(f"{title:^80}")
    print('=' * 80)

def print_subheader(title: str):
    """Print a formatted subsection header."""
    print(f"\n{'-' * 80}")
    print(f"{title}")
    print('-' * 80)

def print_overview(df: pl.DataFrame):
    """Print headline squad numbers."""
    summary = summarize_squad(df)

    print_subheader("Overview")
    print(f"Players: {summary['players']}")
    if summary['average_age'] is not None:
        print(f"Average age: {summary['average_age']:.1f}")
    print(f"Total market value: {summary['total_market_value']:,.0f}")
    print(f"Average market value: {summary['average_market_value']:,.0f}")
    print(f"Injured: {summary['injured']}")
    print(f"Suspended: {summary['suspended']}")
    print(f"On loan / with transfer note: {summary['on_loan']}")

    print_subheader("Players per position")
    for position, count in summary['positions'].items():
        print(f"  {position or 'N/A':25s}: {count:3d}")

def print_top_values(df: pl.DataFrame):
    """Print the ten most valuable players."""
    top = df.sort('market_value', descending=True).head(10)

    print_subheader("Top 10 by market value")
    for i, row in enumerate(top.iter_rows(named=True), 1):
        currency = row['currency'] or ''
        print(f"  {i:2d}. {row['name'] or 'N/A':30s}: {row['market_value']:>14,.0f} {currency}")

def print_nationalities(df: pl.DataFrame):
    """Print the most common nationalities."""
    counts = (df
        .with_columns(pl.col('nationality').str.split(', '))
        .explode('nationality')
        .group_by('nationality')
        .agg(pl.len().alias('count'))
        .sort(['count', 'nationality'], descending=[True, False])
        .head(10)
    )

    print_subheader("Top 10 nationalities")
    for row in counts.iter_rows(named=True):
        print(f"  {row['nationality']:25s}: {row['count']:3d}")

def main():
    """Main entry point."""
    if len(sys.argv) < 2:
        print("Usage: python scripts/squad_summary.py CLUB_ID")
        sys.exit(1)

    club_id = sys.argv[1]
    result = scrape_squad(club_id)

    print_header(f"SQUAD SUMMARY - CLUB {club_id}")

    if not result.ok:
        print(f"⚠️  {result.error}")
        sys.exit(1)

    df = squad_to_frame(result.players)
    if len(df) == 0:
        print("⚠️  No players found")
        return

    print_overview(df)
    print_top_values(df)
    print_nationalities(df)

    if result.skipped_rows:
        print(f"\n⚠️  {result.skipped_rows} rows could not be parsed")

    print("\n" + "=" * 80)
    print("Summary complete!")
    print("=" * 80 + "\n")

if __name__ == "__main__":
    main()
