#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Extract command for the exebat CLI - recover an executable from a script."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout
from provide.foundation.file import atomic_write
from provide.foundation.file.directory import ensure_parent_dir
from provide.foundation.formatting import format_size

from exebat.console import get_command_logger
from exebat.exceptions import PayloadError
from exebat.payload import decode_payload, extract_payload

# Get structured logger for this command
log = get_command_logger("extract")


@click.command("extract")
@click.argument(
    "script_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.argument(
    "output_path",
    type=click.Path(dir_okay=False, resolve_path=True),
    required=True,
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing output file",
)
def extract_command(script_file: str, output_path: str, force: bool) -> None:
    """Recover the embedded executable from a generated batch script.

    OUTPUT_PATH is where to write the decoded executable.
    """
    script = Path(script_file)
    output = Path(output_path)
    log.debug("Extracting payload", script=str(script), output=str(output), force=force)

    if output.exists() and not force:
        log.error("Output file already exists", output=str(output))
        perr(f"❌ Output file already exists: {output}")
        perr("Use --force to overwrite")
        raise click.Abort()

    try:
        data = decode_payload(extract_payload(script.read_text(encoding="latin-1")))
    except PayloadError as e:
        log.error("Error extracting payload", error=str(e), script=script_file)
        perr(f"❌ Error extracting payload: {e}")
        raise click.Abort() from e

    ensure_parent_dir(output)
    atomic_write(output, data)
    log.info("Payload extracted", size=len(data), output=str(output))
    pout(f"✅ Extracted {format_size(len(data))} to {output}")


# 🪟📜🔚
