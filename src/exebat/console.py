#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Structured logger helpers for exebat modules and commands."""

from __future__ import annotations

from typing import Any

from provide.foundation.logger import get_logger


def get_command_logger(name: str) -> Any:
    """Return a named structured logger under the ``exebat`` namespace."""
    return get_logger(f"exebat.{name}")


# 🪟📜🔚
