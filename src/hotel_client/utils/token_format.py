import binascii
import logging
import re
from datetime import datetime, timezone
from typing import Optional

import jwt
from jwt.utils import base64url_decode

logger = logging.getLogger(__name__)

SEGMENT_REGEX = re.compile(r"^[A-Za-z0-9_-]+$")


def is_valid_jwt_format(token: Optional[str]) -> bool:
    """True when the token has exactly three non-empty base64url segments."""
    if not token or not isinstance(token, str):
        return False

    parts = token.split(".")
    if len(parts) != 3:
        return False

    for part in parts:
        if not SEGMENT_REGEX.fullmatch(part):
            return False
        try:
            base64url_decode(part)
        except (binascii.Error, ValueError):
            return False
    return True


def is_token_expired(token: str, now: Optional[datetime] = None) -> bool:
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError as err:
        logger.warning(f"Unreadable token claims: {err}")
        return True

    exp = claims.get("exp")
    if exp is None:
        return False
    now = now or datetime.now(timezone.utc)
    return float(exp) <= now.timestamp()
