"""Pure format checks, one per field kind. No I/O.

Every check takes the submitted value (already known to be non-empty) and the
field's normalized rule, and returns True when the value has the right shape.
"""

from __future__ import annotations

import re
import string
from collections.abc import Callable, Mapping
from types import MappingProxyType

from pydantic import AnyUrl, TypeAdapter, ValidationError

from formcheck.domain.rules import FieldKind, Rule

Check = Callable[[str, Rule], bool]

# Same grammar as WordPress' is_email(): local part, then dot-separated labels
EMAIL_LOCAL_RE = re.compile(r"[a-zA-Z0-9!#$%&'*+/=?^_`{|}~.-]+")
EMAIL_LABEL_RE = re.compile(r"[a-z0-9-]+", re.IGNORECASE | re.ASCII)
EMAIL_MIN_LENGTH = 6
# Decimal integer or float with optional sign/exponent, whitespace allowed around it
NUMBER_RE = re.compile(r"[ \t\n\r\v\f]*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?[ \t\n\r\v\f]*", re.ASCII)
# Iranian mobile numbers: 09xxxxxxxxx, +989xxxxxxxxx, 00989xxxxxxxxx
PHONE_RE = re.compile(r"09\d{9}|(?:\+98|0098)9\d{9}", re.ASCII)
DIGIT_CODE_RE = re.compile(r"\d{6}", re.ASCII)

CHECKBOX_VALUES = frozenset({"on", "off", "1", "0", "true", "false"})
PASSWORD_MIN_LENGTH = 8

# Characters a URL may contain unencoded: alphanumerics plus safe, extra, national, punctuation and reserved
URL_CHARS_RE = re.compile(r"[A-Za-z0-9$\-_.+!*'(),{}|\\^~\[\]`<>#%\";/?:@&=]+")
# Schemes that are valid without a host part
HOSTLESS_URL_SCHEMES = frozenset({"mailto", "news", "file"})

_URL_ADAPTER = TypeAdapter(AnyUrl)


def is_email(value: str) -> bool:
    if len(value) < EMAIL_MIN_LENGTH:
        return False
    # "@" must exist past the first character
    if value.find("@", 1) == -1:
        return False
    local, domain = value.split("@", 1)
    if not EMAIL_LOCAL_RE.fullmatch(local):
        return False
    if ".." in domain:
        return False
    if domain.strip(" \t\n\r\0\x0b.") != domain:
        return False
    labels = domain.split(".")
    if len(labels) < 2:
        return False
    for label in labels:
        if label.strip(" \t\n\r\0\x0b-") != label:
            return False
        if not EMAIL_LABEL_RE.fullmatch(label):
            return False
    return True


def is_number(value: str) -> bool:
    return NUMBER_RE.fullmatch(value) is not None


def is_url(value: str) -> bool:
    """Absolute URL with a scheme and, outside mailto/news/file, a host. No unencoded spaces or non-ASCII."""
    if not URL_CHARS_RE.fullmatch(value):
        return False
    try:
        url = _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    if not url.host:
        return url.scheme in HOSTLESS_URL_SCHEMES
    return True


def is_key(value: str) -> bool:
    """Letters and digits, optionally separated by '-' or '_'. Separators alone do not count."""
    stripped = value.replace("-", "").replace("_", "")
    return stripped.isascii() and stripped.isalnum()


def is_phone(value: str) -> bool:
    return PHONE_RE.fullmatch(value) is not None


def is_digit_code(value: str) -> bool:
    return DIGIT_CODE_RE.fullmatch(value) is not None


def validate_password(password: str) -> bool:
    """Check password strength.

    Requirements:
    - At least 8 characters
    - At least one digit (0-9)
    - At least one uppercase letter (A-Z)
    - At least one lowercase letter (a-z)

    Special characters are allowed but not required.

    Examples:
        >>> validate_password("Abcdefg1")
        True
        >>> validate_password("abcdefgh")
        False
    """
    if len(password) < PASSWORD_MIN_LENGTH:
        return False
    if not any(c in string.digits for c in password):
        return False
    if not any(c in string.ascii_uppercase for c in password):
        return False
    if not any(c in string.ascii_lowercase for c in password):
        return False
    return True


def _check_radio(value: str, rule: Rule) -> bool:
    # No allowed_values means nothing can be selected
    if rule.allowed_values is None:
        return False
    return value in rule.allowed_values


def _accept(value: str, rule: Rule) -> bool:
    return True


DEFAULT_CHECKS: Mapping[str, Check] = MappingProxyType(
    {
        FieldKind.EMAIL.value: lambda value, rule: is_email(value),
        FieldKind.NUMBER.value: lambda value, rule: is_number(value),
        FieldKind.URL.value: lambda value, rule: is_url(value),
        FieldKind.CHECKBOX.value: lambda value, rule: value in CHECKBOX_VALUES,
        FieldKind.RADIO.value: _check_radio,
        FieldKind.KEY.value: lambda value, rule: is_key(value),
        FieldKind.TEXT.value: _accept,
        FieldKind.TEXTAREA.value: _accept,
        FieldKind.PHONE.value: lambda value, rule: is_phone(value),
        FieldKind.DIGIT_CODE.value: lambda value, rule: is_digit_code(value),
        FieldKind.PASSWORD.value: lambda value, rule: validate_password(value),
    }
)


def check_value(value: str, rule: Rule, checks: Mapping[str, Check] = DEFAULT_CHECKS) -> bool | None:
    """Dispatch to the check for rule.kind. Returns None when the kind is unknown."""
    check = checks.get(rule.kind)
    if check is None:
        return None
    return check(value, rule)
