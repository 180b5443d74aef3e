"""
Email address normalisation.

Models validate ``email`` fields with pydantic's EmailStr, which lowercases
the domain part. Lookups must use the same form, so every email crossing
the service boundary goes through ``normalize_email`` first.
"""

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: str) -> str:
    """
    Return the form an EmailStr field stores for this address.

    Strings that are not valid addresses come back unchanged; no stored
    record can match them.
    """
    try:
        return _email_adapter.validate_python(email)
    except PydanticValidationError:
        return email
