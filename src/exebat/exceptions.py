#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for exebat."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class ExebatException(FoundationError):
    """Base exception for all exebat errors."""

    pass


class UnsupportedConversion(ExebatException):
    """Raised when the requested format pair is not EXE to BAT."""

    def __init__(self, input_mime: str, output_mime: str) -> None:
        self.input_mime = input_mime
        self.output_mime = output_mime
        super().__init__(
            f"This handler only supports EXE to BAT conversion, got {input_mime} -> {output_mime}",
            code="EXEBAT_UNSUPPORTED_CONVERSION",
        )


class EncodingFailure(ExebatException):
    """Raised when the rendered script cannot be encoded to bytes."""

    def __init__(self, file_name: str, encoding: str, reason: str) -> None:
        self.file_name = file_name
        self.encoding = encoding
        super().__init__(
            f"Failed to encode batch content for {file_name} as {encoding}: {reason}",
            code="EXEBAT_ENCODING_FAILED",
        )


class PayloadError(ExebatException):
    """Raised when a script does not carry a well-formed payload block."""

    pass


# 🪟📜🔚
