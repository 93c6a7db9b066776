"""
Work validation - the single rule set shared by create and update
"""

from typing import Any, Dict, List, Mapping, Optional
from media_database import WorkCategory
from services.common.result import Result

BLANK = "can't be blank"
NOT_A_CATEGORY = "is not included in the list"
NOT_A_NUMBER = "is not a number"
OUT_OF_RANGE = "must be between -9999 and 9999"

MAX_YEAR = 9999


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _optional_text(value: Any) -> Optional[str]:
    if _blank(value):
        return None
    return str(value)


def validate_work(data: Mapping[str, Any]) -> Result[Dict[str, Any]]:
    """
    Validate submitted work attributes.

    Title must be present and not blank. Category must equal one of
    ``WorkCategory.values()`` exactly: no case folding, no stripping.
    Publication year is optional but must be an integer no larger than
    MAX_YEAR in magnitude when given.

    Returns:
        Result.success with the cleaned attributes, or Result.failure with
        code VALIDATION_ERROR and ``metadata['errors']`` mapping each bad
        field to its messages.
    """
    errors: Dict[str, List[str]] = {}

    title = data.get('title')
    if _blank(title):
        errors.setdefault('title', []).append(BLANK)

    category = data.get('category')
    if _blank(category):
        errors.setdefault('category', []).append(BLANK)
    if WorkCategory.from_value(category) is None:
        errors.setdefault('category', []).append(NOT_A_CATEGORY)

    publication_year = data.get('publication_year')
    if _blank(publication_year):
        publication_year = None
    else:
        try:
            publication_year = int(str(publication_year).strip())
        except ValueError:
            errors.setdefault('publication_year', []).append(NOT_A_NUMBER)
        else:
            if abs(publication_year) > MAX_YEAR:
                errors.setdefault('publication_year', []).append(OUT_OF_RANGE)

    if errors:
        return Result.failure(
            "Work data is invalid",
            code="VALIDATION_ERROR",
            metadata={'errors': errors}
        )

    return Result.success({
        'title': title,
        'category': category,
        'creator': _optional_text(data.get('creator')),
        'publication_year': publication_year,
        'description': _optional_text(data.get('description')),
    })
