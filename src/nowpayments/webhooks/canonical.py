"""
Canonical JSON encoding of IPN payloads.

NOWPayments signs the notification body after re-encoding it with sorted
keys, so the receiving side has to rebuild the exact same byte string.
"""

from __future__ import annotations

import json
from typing import Any

_SEPARATORS = (",", ":")


def canonicalize(decoded: Any) -> bytes:
    """
    Encode a decoded JSON value with keys sorted at every object level.

    Arrays keep their order. Output is compact and ASCII-only (non-ASCII
    characters are emitted as ``\\uXXXX`` escapes), so the same decoded value
    always produces the same bytes regardless of the original key order.

    Raises:
        ValueError: If the value holds NaN or an infinity.
        TypeError: If the value holds something JSON cannot represent.
    """
    text = json.dumps(
        decoded,
        sort_keys=True,
        separators=_SEPARATORS,
        ensure_ascii=True,
        allow_nan=False,
    )
    return text.encode("ascii")
