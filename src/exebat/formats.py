#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Format descriptors and file artifacts exchanged with the host framework."""

from __future__ import annotations

from attrs import evolve, frozen

EXE_MIME = "application/vnd.microsoft.portable-executable"
BATCH_MIME = "application/x-bat"

TARGET_EXTENSION = "bat"


@frozen
class FileFormat:
    """Describes one file format a handler can read or write.

    Only ``mime`` takes part in conversion checks; the remaining fields are
    descriptive metadata for the host.
    """

    name: str
    format: str
    extension: str
    mime: str
    category: str
    internal: str = ""
    from_: bool = False
    to: bool = False
    lossless: bool = False

    def allow_from(self) -> FileFormat:
        return evolve(self, from_=True)

    def allow_to(self) -> FileFormat:
        return evolve(self, to=True)

    def mark_lossless(self) -> FileFormat:
        return evolve(self, lossless=True)


@frozen
class FileData:
    """A named blob of bytes, used for both conversion input and output."""

    name: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


EXE_FORMAT = FileFormat(
    name="Windows Executable",
    format="exe",
    extension="exe",
    mime=EXE_MIME,
    category="application",
    internal="exe",
).allow_from()

BATCH_FORMAT = (
    FileFormat(
        name="Windows Batch File",
        format="bat",
        extension=TARGET_EXTENSION,
        mime=BATCH_MIME,
        category="code",
        internal="bat",
    )
    .allow_to()
    .mark_lossless()
)


# 🪟📜🔚
