from __future__ import annotations

import asyncio
import os
import shutil
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scss_powertools._meta import logger
from scss_powertools.errors import ToolNotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


@dataclass(frozen=True, slots=True)
class ToolOutput:
    returncode: int
    stdout: str
    stderr: str


async def run_node_tool(
    command: Sequence[str],
    *,
    stdin: str | None = None,
    env: Mapping[str, str] | None = None,
) -> ToolOutput:
    """Run *command* without a shell and collect its output.

    Only the first element is looked up on ``PATH``; the rest are passed
    through unchanged.
    """
    executable = shutil.which(command[0])
    if executable is None:
        msg = f"{command[0]}: not found on PATH"
        raise ToolNotFoundError(msg)

    logger.debug("running %s", " ".join(command))
    proc = await asyncio.create_subprocess_exec(
        executable,
        *command[1:],
        stdin=asyncio.subprocess.PIPE if stdin is not None else asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        env={**os.environ, **env} if env else None,
    )
    out, err = await proc.communicate(stdin.encode("utf-8") if stdin is not None else None)
    returncode = proc.returncode if proc.returncode is not None else -1
    logger.debug("%s exited with %d", command[0], returncode)
    return ToolOutput(
        returncode=returncode,
        stdout=out.decode("utf-8", errors="replace"),
        stderr=err.decode("utf-8", errors="replace"),
    )


__all__ = ["ToolOutput", "run_node_tool"]
