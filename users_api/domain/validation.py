"""
User Validation
===============

Required-field rules for new user records, owned by the application so they
hold whatever store sits behind the repository. Email uniqueness is not
checked here; the store's unique index arbitrates it, including under
concurrent creates.
"""
from typing import List, Optional

from users_api.domain.constants.user_fields import UserFields
from users_api.domain.exceptions import UserValidationError


def _is_blank(value: Optional[str]) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_new_user(name: Optional[str], email: Optional[str]) -> None:
    """
    Check the fields of a user about to be created.

    Values are stored exactly as given; whitespace only matters for deciding
    whether a field is blank.

    Args:
        name: Raw name from the request payload
        email: Raw email from the request payload

    Raises:
        UserValidationError: If either field is missing or blank. The message
            names every offending field.
    """
    problems: List[str] = []
    if _is_blank(name):
        problems.append(f"{UserFields.NAME}: {UserFields.NAME} is required")
    if _is_blank(email):
        problems.append(f"{UserFields.EMAIL}: {UserFields.EMAIL} is required")

    if problems:
        raise UserValidationError("User validation failed: " + ", ".join(problems))
