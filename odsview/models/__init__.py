"""Pydantic models for shares and squares."""

from odsview.models.namespace import (
    MIN_SECONDARY_RESERVED,
    PARITY_SHARE,
    PAY_FOR_BLOB,
    PRIMARY_RESERVED_PADDING,
    TAIL_PADDING,
    TRANSACTION,
    Namespace,
    namespace_v0,
    namespace_v255,
)
from odsview.models.share import Share
from odsview.models.square import ODS, RGB, ExtendedDataSquare, ODSCell

__all__ = [
    "Namespace",
    "namespace_v0",
    "namespace_v255",
    "TRANSACTION",
    "PAY_FOR_BLOB",
    "PRIMARY_RESERVED_PADDING",
    "MIN_SECONDARY_RESERVED",
    "TAIL_PADDING",
    "PARITY_SHARE",
    "Share",
    "ExtendedDataSquare",
    "ODS",
    "ODSCell",
    "RGB",
]
