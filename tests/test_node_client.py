"""Tests for the node command line client."""

import base64
import json

import pytest

from odsview.exceptions import DecodeError, NodeError
from odsview.models.namespace import TRANSACTION
from odsview.node.client import CelestiaCliClient, CommandResult, SubprocessCommandRunner


class FakeRunner:
    """Command runner returning canned results and recording commands."""

    def __init__(self, *results: CommandResult):
        self.results = list(results)
        self.commands: list[list[str]] = []

    def run_command(self, cmd):
        self.commands.append(cmd)
        return self.results.pop(0)


def ok(payload) -> CommandResult:
    return CommandResult(returncode=0, stdout=json.dumps(payload), stderr="")


def test_local_head_parses_height():
    """Test the head height is read from the wrapped header."""
    runner = FakeRunner(ok({"result": {"header": {"height": "1234"}}}))
    client = CelestiaCliClient("http://node:26658", runner=runner)

    assert client.local_head() == 1234
    assert runner.commands == [
        ["celestia", "header", "local-head", "--url", "http://node:26658"]
    ]


def test_commands_include_token_and_binary():
    """Test the auth token and binary path are passed through."""
    runner = FakeRunner(ok({"header": {"height": 5}}))
    client = CelestiaCliClient(
        "http://node:26658", auth_token="secret", binary="/opt/celestia", runner=runner
    )

    assert client.local_head() == 5
    assert runner.commands[0][0] == "/opt/celestia"
    assert runner.commands[0][-2:] == ["--token", "secret"]


def test_get_eds_parses_square(raw_share):
    """Test fetching and parsing a square for a height."""
    shares = [raw_share(TRANSACTION)] * 4
    payload = {
        "result": {
            "data_square": [base64.b64encode(s).decode() for s in shares],
            "codec": "Leopard",
        }
    }
    runner = FakeRunner(ok(payload))
    client = CelestiaCliClient("http://node:26658", runner=runner)

    eds = client.get_eds(77)

    assert eds.square_width == 2
    assert eds.share(1, 1) == shares[3]
    assert runner.commands[0][:4] == ["celestia", "share", "get-eds", "77"]


def test_get_eds_invalid_square_raises_decode_error():
    """Test an unparseable square is a decode error, not a node error."""
    runner = FakeRunner(ok({"result": {"data_square": ["%%%"]}}))
    client = CelestiaCliClient("http://node:26658", runner=runner)

    with pytest.raises(DecodeError, match="height 3"):
        client.get_eds(3)


def test_nonzero_exit_raises_node_error():
    """Test a failed command surfaces its stderr."""
    runner = FakeRunner(CommandResult(returncode=1, stdout="", stderr="connection refused\n"))
    client = CelestiaCliClient("http://node:26658", runner=runner)

    with pytest.raises(NodeError, match="connection refused"):
        client.local_head()


def test_invalid_json_raises_node_error():
    """Test non-JSON output is rejected."""
    runner = FakeRunner(CommandResult(returncode=0, stdout="not json", stderr=""))
    client = CelestiaCliClient("http://node:26658", runner=runner)

    with pytest.raises(NodeError, match="invalid JSON"):
        client.get_eds(1)


def test_error_member_raises_node_error():
    """Test a JSON-RPC error payload is rejected."""
    runner = FakeRunner(ok({"error": {"code": 1, "message": "header not found"}}))
    client = CelestiaCliClient("http://node:26658", runner=runner)

    with pytest.raises(NodeError, match="header not found"):
        client.get_eds(99999)


def test_unexpected_header_payload_raises_node_error():
    """Test a header without a height is rejected."""
    runner = FakeRunner(ok({"result": {"dah": {}}}))
    client = CelestiaCliClient("http://node:26658", runner=runner)

    with pytest.raises(NodeError, match="Unexpected header payload"):
        client.local_head()


def test_subprocess_runner_missing_binary():
    """Test a missing binary becomes a failed result instead of raising."""
    result = SubprocessCommandRunner().run_command(["definitely-not-a-celestia-binary-xyz"])
    assert result.returncode != 0
    assert result.stderr
