"""Run command lines through the shell and capture their outcome."""

import os
import signal
import subprocess
import threading
from typing import IO, Callable, List, Optional

from ..commands import CommandLine
from ..config import HomeConfig
from ..logger import get_logger
from ..models import InvocationOutcome

logger = get_logger(__name__)

_CHUNK_SIZE = 64 * 1024


class ProcessInvoker:
    """
    Executes one command line synchronously, once, with no retries.

    The calling thread blocks until the external program exits, the optional
    timeout expires, or the program's combined output passes
    ``max_output_bytes``. In the last two cases the program is killed and the
    run is reported as failed.
    """

    def __init__(self, config: HomeConfig):
        self._max_output_bytes = config.max_output_bytes
        self._timeout: Optional[float] = config.command_timeout

    def run(self, command: CommandLine) -> InvocationOutcome:
        """Execute ``command`` and classify the raw result.

        Args:
            command: The command line to execute.

        Returns:
            The stdout on success, otherwise a failure whose diagnostic is the
            program's stderr when it wrote any, or a generic message.
        """
        rendered = command.render()
        logger.debug("Running command: %s", rendered)

        try:
            process = subprocess.Popen(
                rendered,
                shell=True,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                start_new_session=True,
            )
        except (OSError, ValueError) as e:
            msg = f"Failed to start command: {e}"
            logger.warning(msg)
            return InvocationOutcome.failure(msg)

        budget = _OutputBudget(self._max_output_bytes, on_exceeded=lambda: _kill_process_group(process))
        stdout_chunks: List[bytes] = []
        stderr_chunks: List[bytes] = []
        readers = [
            threading.Thread(target=_drain, args=(process.stdout, stdout_chunks, budget), daemon=True),
            threading.Thread(target=_drain, args=(process.stderr, stderr_chunks, budget), daemon=True),
        ]
        for reader in readers:
            reader.start()

        timed_out = False
        try:
            process.wait(timeout=self._timeout)
        except subprocess.TimeoutExpired:
            timed_out = True
            _kill_process_group(process)
            process.wait()
        for reader in readers:
            reader.join()

        if budget.exceeded:
            msg = f"Command output exceeded {self._max_output_bytes} bytes"
            logger.warning("%s: %s", msg, rendered)
            return InvocationOutcome.failure(msg)

        if timed_out:
            msg = f"Command timed out after {self._timeout:g} seconds"
            logger.warning("%s: %s", msg, rendered)
            return InvocationOutcome.failure(msg)

        stdout = _decode(stdout_chunks)
        if process.returncode != 0:
            diagnostic = _decode(stderr_chunks).strip()
            diagnostic = diagnostic or f"Command failed with exit code {process.returncode}: {rendered}"
            logger.warning("Command exited with %d: %s", process.returncode, diagnostic)
            return InvocationOutcome.failure(diagnostic)

        return InvocationOutcome.success(stdout)


class _OutputBudget:
    """Byte count shared by the stdout and stderr readers of one run."""

    def __init__(self, limit: int, on_exceeded: Callable[[], None]):
        self._limit = limit
        self._on_exceeded = on_exceeded
        self._used = 0
        self._lock = threading.Lock()
        self.exceeded = False

    def consume(self, size: int) -> bool:
        """Account for ``size`` more bytes. Returns False once the limit is passed."""
        with self._lock:
            if self.exceeded:
                return False
            self._used += size
            if self._used <= self._limit:
                return True
            self.exceeded = True
        self._on_exceeded()
        return False


def _drain(stream: IO[bytes], chunks: List[bytes], budget: _OutputBudget) -> None:
    with stream:
        while True:
            chunk = stream.read1(_CHUNK_SIZE)  # type: ignore[attr-defined]
            if not chunk or not budget.consume(len(chunk)):
                return
            chunks.append(chunk)


def _decode(chunks: List[bytes]) -> str:
    return b"".join(chunks).decode("utf-8", errors="replace")


def _kill_process_group(process: subprocess.Popen) -> None:
    # The shell runs the program as a child; kill the whole session.
    if hasattr(os, "killpg"):
        try:
            os.killpg(process.pid, signal.SIGKILL)
            return
        except ProcessLookupError:
            return
    process.kill()
