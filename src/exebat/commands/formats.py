#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Formats command for the exebat CLI."""

from __future__ import annotations

import click
from provide.foundation.console import pout

from exebat.handler import ExeToBatHandler


@click.command("formats")
def formats_command() -> None:
    """List the formats the exe2bat handler reads and writes."""
    handler = ExeToBatHandler()
    pout(f"Handler: {handler.name}")
    for fmt in handler.supported_formats:
        directions = [d for d, enabled in (("from", fmt.from_), ("to", fmt.to)) if enabled]
        flags = ", ".join(directions + (["lossless"] if fmt.lossless else []))
        pout(f"  {fmt.extension:<4} {fmt.mime:<48} {fmt.name} [{flags}]")


# 🪟📜🔚
