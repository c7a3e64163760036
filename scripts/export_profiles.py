"""
Export the profiles collected by the Google scraper to CSV.
"""

import argparse
import sys

from linkedin_leads import config
from linkedin_leads.google_scraper import export_profiles_csv
from linkedin_leads.logging_config import setup_logging
from linkedin_leads.spreadsheet import FileWriteError

logger = setup_logging()


def main():
    """Entry point."""
    parser = argparse.ArgumentParser(description="Export scraped LinkedIn profiles to CSV")
    parser.add_argument(
        "--output",
        type=str,
        metavar="CSV",
        help=f"Output CSV file (default: {config.PROFILES_CSV})",
    )
    args = parser.parse_args()

    try:
        path = export_profiles_csv(args.output)
    except FileWriteError as e:
        logger.error(str(e))
        sys.exit(1)
    if path is None:
        logger.info("No scraped profiles to export")
        return
    logger.info(f"Profiles exported to: {path}")


if __name__ == "__main__":
    main()
