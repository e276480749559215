#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""exebat command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from exebat.commands.convert import convert_command
from exebat.commands.extract import extract_command
from exebat.commands.formats import formats_command
from exebat.config import ExebatConfig

__version__ = get_version("exebat", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="exebat",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Wrap Windows executables in self-extracting batch scripts.

    Configure behaviour via environment variables:
    - EXEBAT_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - EXEBAT_TRACE: Log every conversion step (1/true/yes)
    - EXEBAT_SCRIPT_ENCODING: Single-byte codec for generated scripts (default cp1252)
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    exebat_config = ExebatConfig.from_env()
    cli_ctx = CLIContext.from_env()

    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="exebat",
        logging=evolve(
            base_telemetry.logging,
            default_level=exebat_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["config"] = exebat_config
    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(convert_command, name="convert")
cli.add_command(extract_command, name="extract")
cli.add_command(formats_command, name="formats")

main = cli

if __name__ == "__main__":
    cli()

# 🪟📜🔚
