"""
Runs the MIC plotting script (mic.R) as a child process
"""
import asyncio
import logging
import time
from typing import List, Optional
from mic_upload.config import Settings
from mic_upload.core.exceptions import PlotExecutionError
from mic_upload.models.experiment import ExperimentFields
from mic_upload.models.sample import PlotRunResult

logger = logging.getLogger(__name__)

STDERR_TAIL_CHARS = 2000

class PlotRunner:
    """Invoke the external plotting collaborator for one sample"""

    def __init__(self, settings: Settings):
        self.settings = settings

    def build_command(self, identifier: str, fields: ExperimentFields) -> List[str]:
        """Argument vector: executable, script, identifier, then fields in script order"""
        return [
            self.settings.rscript_executable,
            self.settings.plot_script,
            identifier,
            *fields.as_script_arguments(),
        ]

    async def run(self, identifier: str, fields: ExperimentFields) -> PlotRunResult:
        """Run the script once and wait for it, bounded by the configured timeout"""
        command = self.build_command(identifier, fields)
        start_time = time.monotonic()

        try:
            process = await self._start(command)
        except PlotExecutionError as e:
            logger.error(e.message)
            return PlotRunResult(command=command, error=e.message)

        timeout = self.settings.plot_timeout_seconds
        try:
            _, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
        except asyncio.TimeoutError:
            await self._kill(process)
            elapsed = time.monotonic() - start_time
            logger.error(f"Plot script for {identifier} killed after {timeout}s")
            return PlotRunResult(command=command, timedOut=True, elapsedSeconds=elapsed)
        except asyncio.CancelledError:
            await self._kill(process)
            logger.warning(f"Plot script for {identifier} cancelled")
            raise

        elapsed = time.monotonic() - start_time
        stderr_text = (stderr or b"").decode("utf-8", errors="replace")[-STDERR_TAIL_CHARS:]
        result = PlotRunResult(
            command=command,
            returnCode=process.returncode,
            stderr=stderr_text,
            elapsedSeconds=elapsed
        )

        if process.returncode != 0:
            logger.warning(
                f"Plot script for {identifier} exited with status {process.returncode}: {stderr_text.strip()}"
            )
        else:
            logger.info(f"Plot script for {identifier} finished in {elapsed:.2f}s")

        return result

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process) -> None:
        try:
            process.kill()
        except ProcessLookupError:
            # Already exited
            pass
        await process.wait()

    async def _start(self, command: List[str]) -> asyncio.subprocess.Process:
        try:
            return await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
                cwd=str(self.settings.app_root)
            )
        except OSError as e:
            raise PlotExecutionError(f"Could not start plot script {command[0]!r}: {e}")

def describe_failure(result: PlotRunResult) -> Optional[str]:
    """Short user-facing notice for a failed run, or None"""
    if result.error:
        return "The plot could not be generated: the plotting program is unavailable."
    if result.timedOut:
        return "The plot could not be generated: the plotting program took too long."
    if result.returnCode not in (None, 0):
        return f"The plotting program reported an error (exit status {result.returnCode})."
    return None
