"""Node client abstraction over the node's command line binary."""

import json
import logging
import subprocess
from dataclasses import dataclass
from typing import List, Protocol

from odsview.exceptions import DecodeError, NodeError
from odsview.models.square import ExtendedDataSquare

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result of a node command execution."""

    returncode: int
    stdout: str
    stderr: str


class CommandRunner(Protocol):
    """Protocol for command execution."""

    def run_command(self, cmd: List[str]) -> CommandResult:
        """
        Execute a command.

        Args:
            cmd: Command as list of strings (e.g., ["celestia", "header", "local-head"])

        Returns:
            CommandResult with returncode, stdout, and stderr
        """
        ...


class SubprocessCommandRunner:
    """Command runner implementation using subprocess."""

    def run_command(self, cmd: List[str]) -> CommandResult:
        """
        Execute a command using subprocess.

        Args:
            cmd: Command as list of strings

        Returns:
            CommandResult with returncode, stdout, and stderr
        """
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=False,
            )
            return CommandResult(
                returncode=result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
            )
        except OSError as e:
            # Missing binary etc. surfaces as a failed result
            return CommandResult(
                returncode=1,
                stdout="",
                stderr=str(e),
            )


class NodeClient(Protocol):
    """Protocol for fetching squares from a data availability node."""

    def local_head(self) -> int:
        """Return the latest height known to the node."""
        ...

    def get_eds(self, height: int) -> ExtendedDataSquare:
        """Return the extended data square for ``height``."""
        ...


class CelestiaCliClient:
    """Node client that shells out to the ``celestia`` binary."""

    def __init__(
        self,
        node_url: str,
        auth_token: str | None = None,
        binary: str = "celestia",
        runner: CommandRunner | None = None,
    ):
        """
        Initialize CelestiaCliClient.

        Args:
            node_url: RPC endpoint of the node
            auth_token: Optional node auth token
            binary: Name or path of the node binary
            runner: CommandRunner implementation (defaults to SubprocessCommandRunner)
        """
        self.node_url = node_url
        self.auth_token = auth_token
        self.binary = binary
        self.runner = runner or SubprocessCommandRunner()

    def _build_command(self, *args: str) -> List[str]:
        cmd = [self.binary, *args, "--url", self.node_url]
        if self.auth_token:
            cmd.extend(["--token", self.auth_token])
        return cmd

    def _call(self, *args: str):
        """Run a node command and return its decoded JSON result."""
        cmd = self._build_command(*args)
        logger.debug(f"Running node command: {' '.join(cmd[: len(args) + 1])}")
        result = self.runner.run_command(cmd)

        if result.returncode != 0:
            raise NodeError(
                f"'{' '.join(args)}' failed (exit {result.returncode}): {result.stderr.strip()}"
            )

        try:
            payload = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise NodeError(f"'{' '.join(args)}' returned invalid JSON: {e}") from e

        if isinstance(payload, dict):
            if payload.get("error"):
                raise NodeError(f"'{' '.join(args)}' returned error: {payload['error']}")
            if "result" in payload:
                return payload["result"]
        return payload

    def local_head(self) -> int:
        """Return the height of the node's local head."""
        payload = self._call("header", "local-head")
        try:
            return int(payload["header"]["height"])
        except (KeyError, TypeError, ValueError) as e:
            raise NodeError(f"Unexpected header payload: {e}") from e

    def get_eds(self, height: int) -> ExtendedDataSquare:
        """Fetch the extended data square for a height.

        Raises:
            NodeError: If the node command fails
            DecodeError: If the returned square cannot be parsed
        """
        payload = self._call("share", "get-eds", str(height))
        try:
            return ExtendedDataSquare.from_json(payload)
        except DecodeError as e:
            raise DecodeError(f"EDS at height {height}: {e}") from e
