#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""EXE to BAT conversion.

Each executable is base64 encoded, embedded in a batch wrapper between
payload sentinels, and the rendered text is encoded with a single-byte
codec. Batches are processed in order and stop at the first failure.
"""

from __future__ import annotations

from collections.abc import Iterable
import re
import struct
from typing import Any

from exebat.config import ExebatConfig
from exebat.console import get_command_logger
from exebat.exceptions import EncodingFailure, UnsupportedConversion
from exebat.formats import BATCH_MIME, EXE_MIME, TARGET_EXTENSION, FileData, FileFormat
from exebat.payload import encode_payload
from exebat.template import render_batch_script

_TRAILING_SUFFIX = re.compile(r"\.[^.]*$")
PE_SIGNATURE = b"PE\x00\x00"

log = get_command_logger("converter")


def derive_base_name(name: str) -> str:
    """Strip the final ``.suffix`` from a file name, if there is one."""
    return _TRAILING_SUFFIX.sub("", name, count=1)


def derive_output_name(name: str, extension: str = TARGET_EXTENSION) -> str:
    """Replace the final suffix of ``name`` with ``extension``."""
    return f"{derive_base_name(name)}.{extension}"


def has_mz_signature(data: bytes) -> bool:
    """True when data starts with the DOS "MZ" magic. Used for diagnostics only."""
    return data[:2] == b"MZ"


def pe_header_offset(data: bytes) -> int | None:
    """Follow e_lfanew (0x3C) to the PE signature; None if either is missing."""
    if len(data) < 0x40:
        return None
    (offset,) = struct.unpack_from("<I", data, 0x3C)
    return offset if data[offset : offset + 4] == PE_SIGNATURE else None


class ExeToBatConverter:
    """Turns Windows executables into self-extracting batch scripts."""

    def __init__(self, config: ExebatConfig | None = None, logger: Any | None = None) -> None:
        self.config = config or ExebatConfig()
        self.log = logger or log

    def _trace(self, event: str, **fields: Any) -> None:
        if self.config.trace:
            self.log.debug(event, **fields)

    def check_formats(self, input_format: FileFormat, output_format: FileFormat) -> None:
        """
        Ensure the requested conversion is EXE to BAT.

        Only the MIME identifiers are compared; file contents are never inspected.

        Raises:
            UnsupportedConversion: If either MIME type differs from the supported pair
        """
        self._trace("Checking formats", input_mime=input_format.mime, output_mime=output_format.mime)
        if input_format.mime != EXE_MIME or output_format.mime != BATCH_MIME:
            self.log.debug(
                "MIME type mismatch",
                expected=f"{EXE_MIME} -> {BATCH_MIME}",
                actual=f"{input_format.mime} -> {output_format.mime}",
            )
            raise UnsupportedConversion(input_format.mime, output_format.mime)

    def convert(
        self,
        files: Iterable[FileData],
        input_format: FileFormat,
        output_format: FileFormat,
    ) -> list[FileData]:
        """
        Convert a batch of executables, preserving order.

        Args:
            files: Executables to convert
            input_format: Declared format of the inputs
            output_format: Requested output format

        Returns:
            One batch script per input, in input order

        Raises:
            UnsupportedConversion: If the format pair is not EXE to BAT
            EncodingFailure: If any script cannot be encoded; no results are returned
        """
        self.check_formats(input_format, output_format)

        results = [self.convert_file(file) for file in files]
        self._trace("Batch converted", count=len(results))
        return results

    def convert_file(self, file: FileData) -> FileData:
        """Convert one executable into its batch wrapper."""
        base_name = derive_base_name(file.name)
        bat_name = derive_output_name(file.name)
        self._trace("Converting file", file=file.name, size=file.size, output=bat_name)

        if not has_mz_signature(file.data):
            self.log.warning("Input does not start with an MZ header", file=file.name)
        elif self.config.trace:
            pe_offset = pe_header_offset(file.data)
            self._trace("PE header", file=file.name, pe_offset=None if pe_offset is None else f"0x{pe_offset:x}")

        payload = encode_payload(file.data)
        self._trace("Payload encoded", file=file.name, payload_length=len(payload))

        script = render_batch_script(base_name, payload)
        self._trace("Script rendered", file=file.name, script_length=len(script))

        encoding = self.config.script_encoding
        try:
            script_bytes = script.encode(encoding)
        except (UnicodeEncodeError, LookupError) as e:
            self.log.error("Error encoding batch content", file=file.name, encoding=encoding, error=str(e))
            raise EncodingFailure(file.name, encoding, str(e)) from e

        self._trace("Encoded batch content", file=file.name, size=len(script_bytes))
        return FileData(name=bat_name, data=script_bytes)


# 🪟📜🔚
