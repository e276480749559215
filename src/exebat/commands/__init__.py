#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the exebat CLI."""

from __future__ import annotations

from exebat.commands.convert import convert_command
from exebat.commands.extract import extract_command
from exebat.commands.formats import formats_command

__all__ = [
    "convert_command",
    "extract_command",
    "formats_command",
]

# 🪟📜🔚
