"""
Profile ID extraction - turns any LinkedIn profile URL into a canonical ID.

Handles all common LinkedIn URL shapes:
    https://www.linkedin.com/in/john-doe-123/     -> john-doe-123
    linkedin.com/in/jane-smith                    -> jane-smith
    https://www.linkedin.com/in/karthik?query=x   -> karthik
    https://in.linkedin.com/in/regional-user#top  -> regional-user
    /in/direct-path                               -> direct-path
"""

import re
from typing import Any, NamedTuple
from urllib.parse import unquote_to_bytes

# "/in/" followed by everything up to the first path, query or fragment separator
PROFILE_PATH_PATTERN = re.compile(r"/in/([^/?#]+)", re.IGNORECASE)

# A percent sign not followed by two hex digits makes the escape malformed
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class DecodeResult(NamedTuple):
    """Outcome of percent-decoding a profile token."""

    decoded: bool
    value: str


def decode_profile_token(raw: str) -> DecodeResult:
    """
    Percent-decode a captured profile token.

    Malformed escapes or escapes that do not form valid UTF-8 leave the token
    as-is with decoded=False.
    """
    if _MALFORMED_ESCAPE.search(raw):
        return DecodeResult(False, raw)
    try:
        return DecodeResult(True, unquote_to_bytes(raw).decode("utf-8"))
    except UnicodeDecodeError:
        return DecodeResult(False, raw)


def extract_profile_id(value: Any) -> str | None:
    """
    Extract the canonical LinkedIn profile ID from a cell value.

    Returns the lowercased, percent-decoded token after "/in/", or None if the
    value is not a string or holds no profile path.
    """
    if not value or not isinstance(value, str):
        return None

    clean_value = value.strip()
    if not clean_value:
        return None

    match = PROFILE_PATH_PATTERN.search(clean_value)
    if not match:
        return None

    profile_id = decode_profile_token(match.group(1)).value.lower().strip()
    return profile_id or None
