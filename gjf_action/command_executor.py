# -
# #%L
# Google Java Format Action
# %%
# Copyright (C) 2025 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security’s commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

"""
Command Execution

A thin boundary around subprocess: one process per call, output captured as text,
no retries. It has no knowledge of what it runs; callers decide whether a nonzero
exit code is fatal.
"""

import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from gjf_action.errors import CommandFailed
from gjf_action.utils import debug_log, log, tail_string

MAX_DEBUG_OUTPUT = 1000


@dataclass
class CommandResult:
    exit_code: int
    std_out: str = ""
    std_err: str = ""


def format_command(command: str, args: Optional[Sequence[str]] = None) -> str:
    return f"{command} {' '.join(args or [])}".strip()


def execute(command: str, args: Optional[Sequence[str]] = None, silent: bool = True,
            ignore_return_code: bool = True, working_directory: Optional[str] = None) -> CommandResult:
    """
    Runs a command and captures its output.

    Args:
        command: The executable to run
        args: Arguments passed to the executable, as-is (no shell involved)
        silent: When False, captured stdout/stderr are echoed to the job log
        ignore_return_code: When False, a nonzero exit code raises CommandFailed
        working_directory: Directory to run the command in (defaults to the current one)

    Returns:
        CommandResult: Exit code and captured stdout/stderr

    Raises:
        CommandFailed: If the process could not be started, or exited with a
            nonzero code while ignore_return_code is False
    """
    command_str = format_command(command, args)
    debug_log(f"Executing: {command_str}")

    try:
        process = subprocess.run(
            [command, *(args or [])],
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
            check=False,  # Return code is handled below
            cwd=working_directory,
        )
    except OSError as e:
        raise CommandFailed(
            f"Command '{command_str}' could not be started: {e}",
            command=command_str,
            exit_code=127,
        ) from e

    result = CommandResult(
        exit_code=process.returncode,
        std_out=process.stdout or "",
        std_err=process.stderr or "",
    )
    debug_log(f"Command '{command_str}' terminated with exit code {result.exit_code}")
    if result.std_out:
        debug_log(f"stdout:\n{tail_string(result.std_out, MAX_DEBUG_OUTPUT)}")
    if result.std_err:
        debug_log(f"stderr:\n{tail_string(result.std_err, MAX_DEBUG_OUTPUT)}")

    if not silent:
        if result.std_out:
            log(result.std_out.rstrip("\n"))
        if result.std_err:
            log(result.std_err.rstrip("\n"), is_error=result.exit_code != 0)

    if not ignore_return_code and result.exit_code != 0:
        raise CommandFailed(
            f"Command '{command_str}' failed with exit code {result.exit_code}",
            command=command_str,
            exit_code=result.exit_code,
            std_out=result.std_out,
            std_err=result.std_err,
        )

    return result
