"""Opaque cursor encoding for keyset pagination.

A cursor is the JSON serialization of an item key, base64url encoded with the
padding stripped. Callers must treat it as opaque. There is no compatibility
guarantee for cursors issued before a change of key format.
"""

import base64
import binascii
import json

from pydantic import TypeAdapter, ValidationError

from ..errors.problem_details import CursorMalformedError

Key = str

_key_adapter = TypeAdapter(Key)


def encode_cursor(key: Key) -> str:
    """Encode an item key into an opaque cursor.

    Args:
        key: The unique sort key of the item

    Returns:
        URL-safe base64 cursor string without padding
    """
    payload = json.dumps(key, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(payload).decode("ascii").rstrip("=")


def decode_cursor(cursor: str) -> Key:
    """Decode a cursor produced by :func:`encode_cursor`.

    Args:
        cursor: URL-safe base64 cursor string without padding

    Returns:
        The item key the cursor points at

    Raises:
        CursorMalformedError: If the cursor is empty, padded, not valid
            base64url, or does not contain a serialized key
    """
    if not cursor:
        raise CursorMalformedError("Empty cursor provided")

    if "=" in cursor:
        raise CursorMalformedError("Invalid cursor format: unexpected padding")

    try:
        padded = cursor + "=" * (-len(cursor) % 4)
        payload = base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise CursorMalformedError(f"Invalid cursor format: {e}") from e

    try:
        return _key_adapter.validate_python(json.loads(payload.decode("utf-8")), strict=True)
    except (ValueError, ValidationError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise CursorMalformedError(f"Invalid cursor payload: {e}") from e
