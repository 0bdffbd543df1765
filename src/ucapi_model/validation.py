"""Field validation rules shared by the schema models.

The regular expressions are compiled once at import and never changed. The
constrained string types below carry the length, character set, URL and email
rules as pydantic annotations, so a model declares a rule simply by using the
type (``driver_id: Optional[IdStr] = None``).
"""

from __future__ import annotations

import re
from typing import Annotated, Optional

from pydantic import AfterValidator, AnyUrl, EmailStr, Field, StringConstraints, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

# max length is a dedicated validation for better error messages
REGEX_ID_CHARS = re.compile(r"^[a-zA-Z0-9_-]+$")
REGEX_ICON_ID = re.compile(r"^[a-zA-Z0-9_\-.:]+$")

ID_MAX_LENGTH = 36

_URL_ADAPTER = TypeAdapter(AnyUrl)
_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def _check_id_chars(value: str) -> str:
    if not REGEX_ID_CHARS.match(value):
        raise PydanticCustomError("invalid_characters", "Invalid characters, allowed: a-z A-Z 0-9 _ -")
    return value


def _check_icon_id(value: str) -> str:
    if not REGEX_ICON_ID.match(value):
        raise PydanticCustomError("invalid_characters", "Invalid characters, allowed: a-z A-Z 0-9 _ - . :")
    return value


def _check_url(value: str) -> str:
    # validate only; the wire value stays the string the caller provided
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("invalid_url", "Invalid URL") from None
    return value


def _check_email(value: str) -> str:
    try:
        _EMAIL_ADAPTER.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("invalid_email", "Invalid email address") from None
    return value


def bounded_str(max_length: int, min_length: Optional[int] = None):
    """String type with a maximum and optional minimum length."""
    return Annotated[str, StringConstraints(min_length=min_length, max_length=max_length)]


Str20 = bounded_str(20)
Str50 = bounded_str(50)
Str100 = bounded_str(100)
Str255 = bounded_str(255)
Str2048 = bounded_str(2048)

# Entity, device, driver and integration identifiers.
IdStr = Annotated[str, StringConstraints(min_length=1, max_length=ID_MAX_LENGTH), AfterValidator(_check_id_chars)]
# Icon identifiers, e.g. ``uc:integration`` or ``custom:my_icon.png``.
IconStr = Annotated[str, StringConstraints(max_length=255), AfterValidator(_check_icon_id)]
# Absolute URLs, kept as the original string.
UrlStr = Annotated[str, AfterValidator(_check_url)]
Url255 = Annotated[str, StringConstraints(max_length=255), AfterValidator(_check_url)]
Url2048 = Annotated[str, StringConstraints(max_length=2048), AfterValidator(_check_url)]
Email100 = Annotated[str, StringConstraints(max_length=100), AfterValidator(_check_email)]

# Unsigned integer widths used on the wire.
U8 = Annotated[int, Field(ge=0, le=0xFF)]
U16 = Annotated[int, Field(ge=0, le=0xFFFF)]
U32 = Annotated[int, Field(ge=0, le=0xFFFF_FFFF)]
U64 = Annotated[int, Field(ge=0, le=0xFFFF_FFFF_FFFF_FFFF)]
