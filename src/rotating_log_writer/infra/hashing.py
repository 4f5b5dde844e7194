from __future__ import annotations

"""
Keyed Hashing Utilities.

HMAC helper mirroring the host framework's: the installation secret and
a purpose-specific secret are concatenated into the key.
"""

import hashlib
import hmac as _hmac


def hmac(value: str, additional_secret: str = "", encryption_key: str = "") -> str:
    """
    Compute a hex HMAC-SHA1 of value.

    Args:
        value: Message to authenticate.
        additional_secret: Purpose-specific secret appended to the key.
        encryption_key: Installation secret.

    Returns:
        str: 40-character lowercase hex digest.
    """
    key = (encryption_key + additional_secret).encode("utf-8")
    return _hmac.new(key, value.encode("utf-8"), hashlib.sha1).hexdigest()
