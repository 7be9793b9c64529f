"""Domain type definitions for spendsnap.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in cents (minor units)
- Month: Month in YYYY-MM format
- CategoryName: Name of a spending category
- Description: Expense description text
"""

from typing import Final, Literal, NewType

# Money amounts are stored as cents (minor units) to avoid floating point errors
Money = NewType("Money", int)

# Month is always in YYYY-MM format (e.g., "2024-04")
Month = NewType("Month", str)

# Category name, always one of CATEGORIES
CategoryName = NewType("CategoryName", str)

# Expense description text
Description = NewType("Description", str)

# Closed set of categories, in display order. This order is also the tie-break
# order for ranking categories.
CATEGORIES: Final[tuple[CategoryName, ...]] = (
    CategoryName("Housing"),
    CategoryName("Food"),
    CategoryName("Transport"),
    CategoryName("Health"),
    CategoryName("Utilities"),
    CategoryName("Leisure"),
    CategoryName("Other"),
)

ALL_MONTHS: Final = "all"

# Active filter value: every month, or a single month
Scope = Literal["all"] | Month
