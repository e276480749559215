#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""exebat: wrap Windows executables in self-extracting batch scripts."""

from __future__ import annotations

from provide.foundation.utils import get_version

from exebat.converter import ExeToBatConverter, derive_base_name, derive_output_name
from exebat.exceptions import EncodingFailure, PayloadError, UnsupportedConversion
from exebat.formats import BATCH_FORMAT, EXE_FORMAT, FileData, FileFormat
from exebat.handler import ExeToBatHandler, FormatHandler

__version__ = get_version("exebat", caller_file=__file__)

__all__ = [
    "BATCH_FORMAT",
    "EXE_FORMAT",
    "EncodingFailure",
    "ExeToBatConverter",
    "ExeToBatHandler",
    "FileData",
    "FileFormat",
    "FormatHandler",
    "PayloadError",
    "UnsupportedConversion",
    "__version__",
    "derive_base_name",
    "derive_output_name",
]

# 🪟📜🔚
