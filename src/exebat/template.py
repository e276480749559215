#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Self-extracting batch script template.

The generated script reads its own source (``%~f0``), copies the lines
between the payload sentinels into a temporary ``.b64`` file, decodes it
with ``certutil`` and starts the reconstructed executable from ``%TEMP%``.
"""

from __future__ import annotations

import re

from exebat.payload import BEGIN_SENTINEL, END_SENTINEL

_UNSAFE_PATH_CHARS = re.compile(r"[^A-Za-z0-9._-]")
_CMD_SPECIAL_CHARS = re.compile(r"([\^&|<>()])")

DEFAULT_TEMP_TOKEN = "payload"


def safe_temp_token(base_name: str) -> str:
    """Reduce a base name to characters cmd and PowerShell never interpret."""
    token = _UNSAFE_PATH_CHARS.sub("_", base_name).strip(".")
    return token or DEFAULT_TEMP_TOKEN


def escape_cmd_text(text: str) -> str:
    """Caret-escape cmd operators and double ``%`` so text stays literal."""
    return _CMD_SPECIAL_CHARS.sub(r"^\1", text).replace("%", "%%")


def render_batch_script(base_name: str, payload: str) -> str:
    """
    Render the batch wrapper for one executable.

    Args:
        base_name: Output base name, shown escaped in the header comment and
            reduced to a safe token for temp file names
        payload: Single-line base64 payload placed between the sentinels

    Returns:
        Script text with LF line endings
    """
    display_name = escape_cmd_text(f"{base_name}.exe")
    token = safe_temp_token(base_name)
    # Each sentinel appears once: the PowerShell line concatenates its copies.
    # An empty payload leaves the two sentinel lines adjacent.
    payload_lines = [BEGIN_SENTINEL, payload, END_SENTINEL] if payload else [BEGIN_SENTINEL, END_SENTINEL]
    payload_block = "\n".join(payload_lines)
    return f"""@echo off
setlocal

:: Auto-generated EXE-embedded batch
:: Reconstructs and runs {display_name}

set "selfPath=%~f0"
set "outExe=%TEMP%\\{token}.exe"
set "b64file=%TEMP%\\{token}.b64"

:: Remove leftovers from a previous run
if exist "%b64file%" del /f /q "%b64file%"
if exist "%outExe%" del /f /q "%outExe%"

echo Extracting payload to "%b64file%"...
powershell -NoProfile -Command "$lines = @(Get-Content -LiteralPath $env:selfPath); $start = $lines.IndexOf('{BEGIN_SENTINEL[:5]}' + '{BEGIN_SENTINEL[5:]}') + 1; $end = $lines.IndexOf('{END_SENTINEL[:5]}' + '{END_SENTINEL[5:]}'); if ($end -gt $start) {{ $payload = $lines[$start..($end-1)] }} else {{ $payload = '' }}; Set-Content -LiteralPath $env:b64file -Value $payload -Encoding ASCII"

if exist "%b64file%" (
  echo Payload extracted successfully
  for %%i in ("%b64file%") do echo Payload size: %%~zi bytes
) else (
  echo ERROR: Payload extraction failed
  exit /b 1
)

echo Decoding using certutil...
certutil -decode "%b64file%" "%outExe%" >nul
if errorlevel 1 (
  echo ERROR: certutil failed to decode "%b64file%"
  exit /b 1
)
echo Certutil decoding successful

if not exist "%outExe%" (
  echo ERROR: reconstruction failed, "%outExe%" was not created
  exit /b 1
)

del /f /q "%b64file%"
echo Running "%outExe%"...
start "" "%outExe%"

exit /b 0

{payload_block}
"""


# 🪟📜🔚
