from __future__ import annotations

import re
from hashlib import sha3_512

DIGEST_HEX_LENGTH = 128

_DIGEST_RE = re.compile(r"[0-9a-f]{128}")


def digest_hex(text: str) -> str:
    """
    SHA3-512 of the UTF-8 bytes of ``text``.

    Format: 128 lowercase hex characters
    """

    return sha3_512(text.encode("utf-8")).hexdigest()


def is_digest(value: str) -> bool:
    return bool(_DIGEST_RE.fullmatch(value))
