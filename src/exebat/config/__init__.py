#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""exebat configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from exebat.config.runtime import ExebatConfig

__all__ = ["ExebatConfig"]

# 🪟📜🔚
