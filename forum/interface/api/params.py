"""Shared query parameter parsing."""

from forum.domain.error import InvalidInputError
from forum.domain.value import Category

# Board filter value meaning "every category"
ALL_CATEGORIES = "all"


def parse_category(value: str | None) -> Category | None:
    """Parse a category filter.

    Args:
        value: Category value, "all", or None

    Returns:
        The category, or None for no filter

    Raises:
        InvalidInputError: If the value is not a known category
    """
    if not value or value == ALL_CATEGORIES:
        return None
    try:
        return Category(value)
    except ValueError:
        raise InvalidInputError(f"Unknown category: {value}")
