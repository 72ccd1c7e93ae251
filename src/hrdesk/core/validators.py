"""Format validators for Italian company and employee registration codes."""

import re
from typing import Final

IVA_CODE_REGEX: Final[str] = r"^\d{11}$"
# Companies use their 11-digit VAT number; sole traders use a personal code.
FISCAL_CODE_REGEX: Final[str] = r"^(\d{11}|[A-Z]{6}\d{2}[A-Z]\d{2}[A-Z]\d{3}[A-Z])$"
PHONE_REGEX: Final[str] = r"^\+?[0-9 ()/.-]{5,20}$"

_IVA_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(IVA_CODE_REGEX)
_FISCAL_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(FISCAL_CODE_REGEX)
_PHONE_PATTERN: Final[re.Pattern[str]] = re.compile(PHONE_REGEX)


def validate_iva_code(value: str) -> str:
    """Validate a partita IVA (11 digits). Surrounding whitespace is dropped."""
    value = value.strip()
    if not _IVA_CODE_PATTERN.match(value):
        raise ValueError("IVA code must be exactly 11 digits")
    return value


def validate_fiscal_code(value: str) -> str:
    """Validate a codice fiscale, either numeric (11) or alphanumeric (16).

    Returns the upper-cased code.
    """
    value = value.strip().upper()
    if not _FISCAL_CODE_PATTERN.match(value):
        raise ValueError("Fiscal code must be 11 digits or a 16-character personal code")
    return value


def validate_phone(value: str) -> str:
    value = value.strip()
    if not _PHONE_PATTERN.match(value):
        raise ValueError("Phone number contains invalid characters")
    return value
