#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Convert command for the exebat CLI - wrap executables in batch scripts."""

from __future__ import annotations

import asyncio
from collections import Counter
from pathlib import Path

import click
from provide.foundation.console import perr, pout
from provide.foundation.file import atomic_write
from provide.foundation.file.directory import ensure_dir
from provide.foundation.formatting import format_size

from exebat.console import get_command_logger
from exebat.converter import derive_output_name
from exebat.exceptions import ExebatException
from exebat.formats import BATCH_FORMAT, EXE_FORMAT, FileData
from exebat.handler import ExeToBatHandler

# Get structured logger for this command
log = get_command_logger("convert")


@click.command("convert")
@click.argument(
    "exe_files",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, resolve_path=True),
    default=None,
    help="Directory for generated scripts (default: next to each input)",
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing output files",
)
@click.pass_context
def convert_command(ctx: click.Context, exe_files: tuple[str, ...], output_dir: str | None, force: bool) -> None:
    """Wrap one or more executables in self-extracting batch scripts."""
    inputs = [Path(f) for f in exe_files]
    log.debug("Convert command started", files=len(inputs), output_dir=output_dir, force=force)

    targets = _plan_targets(inputs, Path(output_dir) if output_dir else None)
    collisions = sorted(target for target, count in Counter(targets).items() if count > 1)
    if collisions:
        for target in collisions:
            log.error("Multiple inputs map to the same output", output=str(target))
            perr(f"❌ Multiple inputs would be written to: {target}")
        perr("Convert them separately or into different output directories")
        raise click.Abort()

    existing = [t for t in targets if t.exists()]
    if existing and not force:
        for target in existing:
            log.error("Output file already exists", output=str(target))
            perr(f"❌ Output file already exists: {target}")
        perr("Use --force to overwrite")
        raise click.Abort()

    handler = ExeToBatHandler(config=ctx.obj.get("config") if ctx.obj else None)
    files = [FileData(name=p.name, data=p.read_bytes()) for p in inputs]

    try:
        results = asyncio.run(_run_handler(handler, files))
    except ExebatException as e:
        log.error("Conversion failed", error=str(e))
        perr(f"❌ Conversion failed: {e}")
        raise click.Abort() from e

    for result, target in zip(results, targets, strict=True):
        ensure_dir(target.parent)
        atomic_write(target, result.data)
        log.info("Batch script written", output=str(target), size=result.size)
        pout(f"✅ {target} ({format_size(result.size)})")


async def _run_handler(handler: ExeToBatHandler, files: list[FileData]) -> list[FileData]:
    await handler.init()
    return await handler.do_convert(files, EXE_FORMAT, BATCH_FORMAT)


def _plan_targets(inputs: list[Path], output_dir: Path | None) -> list[Path]:
    """Work out where each generated script will be written."""
    return [(output_dir or p.parent) / derive_output_name(p.name) for p in inputs]


# 🪟📜🔚
