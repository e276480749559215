#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for exebat configuration."""

from __future__ import annotations

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TRACE = False  # Per-step conversion tracing

# =================================
# Script output defaults
# =================================
DEFAULT_SCRIPT_ENCODING = "cp1252"  # Single byte per character, covers Western names

# 🪟📜🔚
