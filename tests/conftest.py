import io

import pytest
from rich.console import Console

from odsview.constants import NAMESPACE_SIZE, SHARE_SIZE
from odsview.models.namespace import TRANSACTION, Namespace, namespace_v0
from odsview.models.square import ExtendedDataSquare


@pytest.fixture
def raw_share():
    """Factory building a raw share for a namespace."""

    def _raw_share(namespace: Namespace, fill: int = 0, info_byte: int = 1) -> bytes:
        body = bytes([info_byte]) + bytes([fill]) * (SHARE_SIZE - NAMESPACE_SIZE - 1)
        return namespace.as_bytes() + body

    return _raw_share


@pytest.fixture
def make_eds(raw_share):
    """Factory building a square of the given width.

    ``namespace_at(row, col)`` picks each share's namespace (TRANSACTION by
    default). Each share's payload byte encodes its position so tests can
    tell shares apart.
    """

    def _make_eds(width: int, namespace_at=None) -> ExtendedDataSquare:
        rows = []
        for i in range(width):
            row = []
            for j in range(width):
                namespace = namespace_at(i, j) if namespace_at else TRANSACTION
                row.append(raw_share(namespace, fill=(i * width + j) % 256))
            rows.append(row)
        return ExtendedDataSquare.from_rows(rows)

    return _make_eds


@pytest.fixture
def user_namespace():
    """A non-reserved version 0 namespace."""
    return namespace_v0(b"\xab\xcd")


@pytest.fixture
def color_console():
    """Truecolor console writing into a string buffer."""
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system="truecolor",
        width=200,
        highlight=False,
    )


@pytest.fixture
def plain_console():
    """Console without styling writing into a string buffer."""
    return Console(
        file=io.StringIO(),
        force_terminal=False,
        color_system=None,
        width=200,
        highlight=False,
    )
