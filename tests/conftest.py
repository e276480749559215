#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for exebat tests."""

from __future__ import annotations

from collections.abc import Iterator
import struct

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from exebat.formats import FileData


def create_minimal_pe(pe_offset: int = 0x80, size: int = 512) -> bytes:
    """Create a tiny buffer with an MZ header pointing at a PE signature."""
    data = bytearray(size)
    data[0:2] = b"MZ"
    data[0x3C:0x40] = struct.pack("<I", pe_offset)
    data[pe_offset : pe_offset + 4] = b"PE\x00\x00"
    return bytes(data)


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def setup_exe() -> FileData:
    """The four-byte MZ stub used throughout the examples."""
    return FileData(name="setup.exe", data=bytes([0x4D, 0x5A, 0x90, 0x00]))


@pytest.fixture
def pe_exe() -> FileData:
    return FileData(name="tool.exe", data=create_minimal_pe())
