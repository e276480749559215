#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the exe2bat handler registration surface."""

from __future__ import annotations

import asyncio

import pytest

from exebat.exceptions import UnsupportedConversion
from exebat.formats import BATCH_FORMAT, BATCH_MIME, EXE_FORMAT, EXE_MIME, FileData
from exebat.handler import ExeToBatHandler, FormatHandler


@pytest.mark.unit
class TestHandlerRegistration:
    """Tests for the metadata a host reads before converting."""

    def test_identity(self) -> None:
        handler = ExeToBatHandler()
        assert handler.name == "exe2bat"
        assert handler.supports_any_input is False

    def test_satisfies_protocol(self) -> None:
        assert isinstance(ExeToBatHandler(), FormatHandler)

    def test_not_ready_until_init(self) -> None:
        handler = ExeToBatHandler()
        assert handler.ready is False
        asyncio.run(handler.init())
        assert handler.ready is True

    def test_supported_formats(self) -> None:
        exe, bat = ExeToBatHandler().supported_formats

        assert exe.mime == EXE_MIME
        assert exe.extension == "exe"
        assert exe.from_ is True
        assert exe.to is False

        assert bat.mime == BATCH_MIME
        assert bat.extension == "bat"
        assert bat.to is True
        assert bat.lossless is True


@pytest.mark.unit
class TestHandlerConvert:
    """Tests for do_convert."""

    def test_converts_batch(self, setup_exe: FileData) -> None:
        handler = ExeToBatHandler()
        results = asyncio.run(handler.do_convert([setup_exe, FileData("noext", b"")], EXE_FORMAT, BATCH_FORMAT))
        assert [r.name for r in results] == ["setup.bat", "noext.bat"]

    def test_ignores_extra_args(self, setup_exe: FileData) -> None:
        handler = ExeToBatHandler()
        results = asyncio.run(handler.do_convert([setup_exe], EXE_FORMAT, BATCH_FORMAT, args=["--whatever"]))
        assert len(results) == 1

    def test_unsupported_pair(self, setup_exe: FileData) -> None:
        handler = ExeToBatHandler()
        with pytest.raises(UnsupportedConversion):
            asyncio.run(handler.do_convert([setup_exe], BATCH_FORMAT, BATCH_FORMAT))
