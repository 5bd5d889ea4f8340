"""
This file represents the phone number rule for user records. If you need to check a phone number,
use validate_phone or the Phone type.
"""
import re
from typing import Annotated

from pydantic import BeforeValidator

# internal
from app.core.errors import FormatValidationError, MissingFieldError

# optional leading +, then 10 to 15 digits
PHONE_PATTERN = re.compile(r"\+?[0-9]{10,15}")

def validate_phone(candidate):
    """Returns the candidate unchanged if it is a valid phone number, otherwise raises"""
    if candidate is None or candidate == "":
        raise MissingFieldError(field="phone")
    if not isinstance(candidate, str) or PHONE_PATTERN.fullmatch(candidate) is None:
        raise FormatValidationError(candidate)
    return candidate

# our errors are not ValueErrors so pydantic lets them propagate as is
Phone = Annotated[str, BeforeValidator(validate_phone)]
