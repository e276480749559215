#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Base64 payload encoding and sentinel-block extraction."""

from __future__ import annotations

import base64
import binascii

from exebat.exceptions import PayloadError

BEGIN_SENTINEL = "-----BEGIN PAYLOAD-----"
END_SENTINEL = "-----END PAYLOAD-----"


def encode_payload(data: bytes) -> str:
    """
    Encode binary data as a single line of standard padded base64.

    Args:
        data: Raw bytes to embed

    Returns:
        Base64 text with no line breaks (empty string for empty input)
    """
    return base64.b64encode(data).decode("ascii")


def decode_payload(text: str) -> bytes:
    """
    Decode base64 payload text back into the original bytes.

    Line breaks and surrounding whitespace are ignored, matching what
    ``certutil -decode`` accepts.

    Raises:
        PayloadError: If the text is not valid base64
    """
    compact = "".join(text.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise PayloadError(f"Payload is not valid base64: {e}") from e


def extract_payload(script_text: str) -> str:
    """
    Return the text strictly between the BEGIN and END sentinel lines.

    Args:
        script_text: Full text of a generated script

    Returns:
        The payload lines joined with newlines (empty if the sentinels are adjacent)

    Raises:
        PayloadError: If the sentinels are missing, repeated or out of order
    """
    lines = script_text.splitlines()
    begins = [i for i, line in enumerate(lines) if line.strip() == BEGIN_SENTINEL]
    ends = [i for i, line in enumerate(lines) if line.strip() == END_SENTINEL]

    if len(begins) != 1 or len(ends) != 1:
        raise PayloadError(
            f"Expected exactly one payload block, found {len(begins)} begin and {len(ends)} end markers"
        )

    start, end = begins[0], ends[0]
    if end < start:
        raise PayloadError("Payload end marker precedes begin marker")

    return "\n".join(lines[start + 1 : end])


# 🪟📜🔚
