#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Format handler registration surface for the host conversion framework."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from exebat.config import ExebatConfig
from exebat.console import get_command_logger
from exebat.converter import ExeToBatConverter
from exebat.formats import BATCH_FORMAT, EXE_FORMAT, FileData, FileFormat

log = get_command_logger("handler")


@runtime_checkable
class FormatHandler(Protocol):
    """Capabilities a host expects from any format handler."""

    name: str
    ready: bool
    supported_formats: list[FileFormat]
    supports_any_input: bool

    async def init(self) -> None: ...

    async def do_convert(
        self,
        input_files: list[FileData],
        input_format: FileFormat,
        output_format: FileFormat,
        args: list[str] | None = None,
    ) -> list[FileData]: ...


class ExeToBatHandler:
    """Handler that wraps Windows executables in self-extracting batch files."""

    name = "exe2bat"
    supports_any_input = False

    def __init__(self, config: ExebatConfig | None = None, logger: Any | None = None) -> None:
        self.ready = False
        self.supported_formats: list[FileFormat] = [EXE_FORMAT, BATCH_FORMAT]
        self.converter = ExeToBatConverter(config=config, logger=logger)

    async def init(self) -> None:
        self.ready = True
        log.debug("Handler ready", handler=self.name, formats=[f.format for f in self.supported_formats])

    async def do_convert(
        self,
        input_files: list[FileData],
        input_format: FileFormat,
        output_format: FileFormat,
        args: list[str] | None = None,
    ) -> list[FileData]:
        """Convert ``input_files`` from EXE to BAT. ``args`` is accepted and ignored."""
        log.debug(
            "Converting",
            handler=self.name,
            input_mime=input_format.mime,
            output_mime=output_format.mime,
            files=len(input_files),
        )
        return self.converter.convert(input_files, input_format, output_format)


# 🪟📜🔚
