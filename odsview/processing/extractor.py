"""Original data square extraction from an extended data square."""

import logging

from odsview.exceptions import DecodeError
from odsview.models.share import Share
from odsview.models.square import ODS, ExtendedDataSquare, ODSCell
from odsview.processing.classifier import classify

logger = logging.getLogger(__name__)


def validate_square_shape(eds: ExtendedDataSquare) -> int:
    """Check that the square can hold an original data quadrant.

    Args:
        eds: Extended data square to check

    Returns:
        Width of the extended square

    Raises:
        DecodeError: If the share count is not a square or the width is zero or odd
    """
    if not eds.is_square:
        raise DecodeError(
            f"Extended data square is not square: {eds.share_count} shares"
        )
    width = eds.square_width
    if width == 0:
        raise DecodeError("Extended data square is empty")
    if width % 2 != 0:
        raise DecodeError(f"Extended data square width must be even, got {width}")
    return width


def build_ods(eds: ExtendedDataSquare, height: int) -> ODS:
    """Extract and classify the original data square.

    Walks the top-left quadrant row by row, decoding and classifying each
    share. The first decode failure aborts the whole extraction.

    Args:
        eds: Extended data square fetched for ``height``
        height: Block height the square belongs to

    Returns:
        ODS whose cell ``(i, j)`` comes from EDS share ``(i, j)``

    Raises:
        DecodeError: If the square shape is invalid or a share cannot be decoded
    """
    ods_width = validate_square_shape(eds) // 2

    cells: list[list[ODSCell]] = []
    for i in range(ods_width):
        row: list[ODSCell] = []
        for j in range(ods_width):
            try:
                share = Share.from_raw(eds.share(i, j))
            except DecodeError as e:
                raise DecodeError(f"Share ({i}, {j}) at height {height}: {e}") from e
            row.append(classify(share))
        cells.append(row)

    logger.debug(f"Built {ods_width}x{ods_width} ODS for height {height}")
    return ODS(height=height, cells=cells)
