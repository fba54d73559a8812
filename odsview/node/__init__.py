"""Node access and the fetch loop."""

from odsview.node.client import (
    CelestiaCliClient,
    CommandResult,
    CommandRunner,
    NodeClient,
    SubprocessCommandRunner,
)
from odsview.node.service import SquareRenderer, SquareService

__all__ = [
    "CelestiaCliClient",
    "CommandResult",
    "CommandRunner",
    "NodeClient",
    "SquareRenderer",
    "SquareService",
    "SubprocessCommandRunner",
]
