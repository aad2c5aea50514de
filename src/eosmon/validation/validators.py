"""
Validation functions for configuration values.
"""

import re
from typing import Any, List, Optional

from .exceptions import ValidationError

# xroot URLs as accepted by the eos client, e.g. root://eos-example.org:1094
_MGM_URL_PATTERN = re.compile(r"^(root|roots|http|https)://[^\s/:]+(:\d+)?/?$")


def validate_positive_float(
    value: Any,
    min_value: float = 0.0,
    max_value: Optional[float] = None,
    field_name: str = "value"
) -> float:
    """
    Validate a number such as a timeout against inclusive bounds.

    Booleans are rejected even though they are ints in Python.

    Raises:
        ValidationError: If the value is not a number or out of bounds
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError(
            f"{field_name} must be a number, got {value!r}", field_name=field_name, value=value
        )
    try:
        number = float(value)
    except ValueError:
        raise ValidationError(
            f"{field_name} must be a number, got {value!r}", field_name=field_name, value=value
        ) from None

    out_of_range = number < min_value or (max_value is not None and number > max_value)
    if out_of_range:
        upper = "" if max_value is None else f" and {max_value}"
        bounds = f"between {min_value}{upper}" if upper else f">= {min_value}"
        raise ValidationError(
            f"{field_name} must be {bounds}, got {number}", field_name=field_name, value=value
        )
    return number


def validate_enum_choice(
    value: Any,
    choices: List[str],
    field_name: str = "value",
    case_sensitive: bool = True
) -> str:
    """
    Validate that a value is one of ``choices``.

    Returns:
        The matching entry of ``choices``, so that case-insensitive input is
        normalized to its canonical spelling.

    Raises:
        ValidationError: If value is not in choices
    """
    text = str(value)
    for choice in choices:
        if choice == text or (not case_sensitive and choice.lower() == text.lower()):
            return choice
    raise ValidationError(
        f"{field_name} must be one of {choices}, got {value!r}", field_name=field_name, value=value
    )


def validate_mgm_url(url: Any, field_name: str = "mgm_url") -> str:
    """
    Validate the MGM endpoint URL handed to the client through EOS_MGM_URL.

    Credentials embedded in the URL are rejected so that the endpoint can be
    logged safely.

    Raises:
        ValidationError: If the URL is empty, malformed or carries credentials
    """
    if not isinstance(url, str) or not url.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=url
        )
    url = url.strip()
    if "@" in url:
        raise ValidationError(
            f"{field_name} must not embed credentials",
            field_name=field_name,
            value="<redacted>"
        )
    if not _MGM_URL_PATTERN.match(url):
        raise ValidationError(
            f"{field_name} is not a valid MGM URL: {url}",
            field_name=field_name,
            value=url
        )
    return url


def validate_executable_path(path: Any, field_name: str = "binary") -> str:
    """
    Validate the path of the eos binary.

    The subprocess does not inherit PATH, so the binary must be absolute.
    Existence is checked at call time, not here.
    """
    if not isinstance(path, str) or not path.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=path
        )
    if not path.startswith("/"):
        raise ValidationError(
            f"{field_name} must be an absolute path, got {path}",
            field_name=field_name,
            value=path
        )
    return path
