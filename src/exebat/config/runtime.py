#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""exebat runtime configuration."""

from __future__ import annotations

import codecs

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from exebat.config.defaults import DEFAULT_LOG_LEVEL, DEFAULT_SCRIPT_ENCODING, DEFAULT_TRACE

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_flag(value: bool | str) -> bool:
    """Accept booleans or the usual environment spellings of them."""
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value}")


def parse_script_encoding(value: str) -> str:
    """Resolve a codec name and require one byte per character."""
    try:
        info = codecs.lookup(value.strip())
    except LookupError as e:
        raise ValueError(f"Unknown script encoding: {value}") from e

    if info.name.startswith("utf") or len("A".encode(info.name)) != 1:
        raise ValueError(f"Script encoding must be single-byte: {value}")
    return info.name


@define
class ExebatConfig(RuntimeConfig):
    """Settings shared by the converter and the CLI."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="EXEBAT_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for exebat operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    trace: bool = field(
        default=DEFAULT_TRACE,
        env_var="EXEBAT_TRACE",
        converter=parse_flag,
        metadata={"help": "Log every conversion step at debug level"},
    )

    script_encoding: str = field(
        default=DEFAULT_SCRIPT_ENCODING,
        env_var="EXEBAT_SCRIPT_ENCODING",
        converter=parse_script_encoding,
        metadata={"help": "Single-byte codec used to write generated scripts"},
    )

# 🪟📜🔚
