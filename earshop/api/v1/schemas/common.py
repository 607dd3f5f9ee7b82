# earshop/api/v1/schemas/common.py
from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from fastapi import Path
from pydantic import AfterValidator, Field, StringConstraints

from earshop.domain.services.constants import (
    ALPHANUM_PATTERN,
    EMAIL_CHARSET_PATTERN,
    PASSWORD_MIN_LENGTH,
)


def _check_email_syntax(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"must be a valid email: {e}") from e
    return value


# lower-case only, on top of the usual email syntax
Email = Annotated[
    str,
    StringConstraints(strip_whitespace=True, pattern=EMAIL_CHARSET_PATTERN),
    AfterValidator(_check_email_syntax),
]
Password = Annotated[str, StringConstraints(strip_whitespace=True, min_length=PASSWORD_MIN_LENGTH)]
Alphanum = Annotated[str, StringConstraints(pattern=ALPHANUM_PATTERN)]

# Path parameters carrying document ids
IdPath = Annotated[str, Path(pattern=ALPHANUM_PATTERN)]
EmailPath = Annotated[Email, Path()]

# Clients may echo a stored `_id` back in a payload: it is format-checked, then never written
EchoedId = Annotated[Optional[Alphanum], Field(alias="_id", exclude=True)]
