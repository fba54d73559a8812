"""Terminal viewer for the original data square of a data availability block."""

from odsview.config import ViewerConfig
from odsview.exceptions import DecodeError, ViewerError
from odsview.models import ODS, ExtendedDataSquare, ODSCell, Share
from odsview.processing import build_ods, classify

__all__ = [
    "DecodeError",
    "ExtendedDataSquare",
    "ODS",
    "ODSCell",
    "Share",
    "ViewerConfig",
    "ViewerError",
    "build_ods",
    "classify",
]
