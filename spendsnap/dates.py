"""Date utilities for spendsnap.

Pure functions for date normalization and month labels.
"""

from datetime import date, datetime

import pandas as pd

from spendsnap.domain.models import Month


def normalize_date(raw_date: str) -> str:
    """Normalize a human-entered date string to ISO format (YYYY-MM-DD).

    ISO dates are taken as-is; anything else goes through pandas.to_datetime,
    reading ambiguous dates day first (e.g., 06/04/2024 is 6 April).

    Args:
        raw_date: Raw date string.

    Returns:
        Normalized date in YYYY-MM-DD format.

    Raises:
        ValueError: If date cannot be parsed.
    """
    value = raw_date.strip()
    if not value:
        raise ValueError("Date is required")

    try:
        return datetime.strptime(value, "%Y-%m-%d").strftime("%Y-%m-%d")
    except ValueError:
        pass

    try:
        parsed_date = pd.to_datetime(value, dayfirst=True)
    except (ValueError, pd.errors.ParserError) as e:
        raise ValueError(f"Could not parse date '{raw_date}': {e}") from e

    if pd.isna(parsed_date):
        raise ValueError(f"Could not parse date '{raw_date}'")

    return parsed_date.strftime("%Y-%m-%d")


def today() -> str:
    """Get today's date in YYYY-MM-DD format."""
    return date.today().isoformat()


def month_label(month: Month) -> str:
    """Format a month for display.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Short label (e.g., "Apr 2024").

    Raises:
        ValueError: If month is not in YYYY-MM format.
    """
    return datetime.strptime(month, "%Y-%m").strftime("%b %Y")
