"""Extended and original data square models."""

import base64
import binascii
import math

from pydantic import BaseModel, Field, ValidationError, field_validator

from odsview.exceptions import DecodeError

RGB = tuple[int, int, int]


class ExtendedDataSquare(BaseModel):
    """Erasure-coded square of raw shares as served by the node.

    Shares are stored flat in row-major order. Original data lives in the
    top-left quadrant, parity in the other three.
    """

    data_square: list[bytes]
    codec: str = "Leopard"

    @classmethod
    def from_rows(cls, rows: list[list[bytes]], codec: str = "Leopard") -> "ExtendedDataSquare":
        """Build a square from nested rows of raw shares."""
        return cls(data_square=[share for row in rows for share in row], codec=codec)

    @classmethod
    def from_json(cls, payload: dict) -> "ExtendedDataSquare":
        """Build a square from the node's JSON form.

        Args:
            payload: Dict with a ``data_square`` list of base64 shares and
                an optional ``codec`` name

        Returns:
            Parsed square (shares are not decoded yet)

        Raises:
            DecodeError: If the payload is missing shares or holds invalid base64
        """
        if not isinstance(payload, dict) or "data_square" not in payload:
            raise DecodeError("Invalid EDS payload: missing 'data_square'")

        encoded = payload["data_square"]
        if not isinstance(encoded, list):
            raise DecodeError("Invalid EDS payload: 'data_square' must be a list")

        shares = []
        for index, item in enumerate(encoded):
            try:
                shares.append(base64.b64decode(item, validate=True))
            except (binascii.Error, TypeError, ValueError) as e:
                raise DecodeError(f"Invalid base64 share at index {index}: {e}") from e

        try:
            return cls(data_square=shares, codec=payload.get("codec") or "Leopard")
        except ValidationError as e:
            raise DecodeError(f"Invalid extended data square: {e}") from e

    @property
    def share_count(self) -> int:
        return len(self.data_square)

    @property
    def square_width(self) -> int:
        """Side length of the square (floor of the square root for malformed input)."""
        return math.isqrt(self.share_count)

    @property
    def is_square(self) -> bool:
        return self.square_width**2 == self.share_count

    def share(self, row: int, col: int) -> bytes:
        """Return the raw share at ``(row, col)``.

        Raises:
            DecodeError: If the coordinate lies outside the square
        """
        width = self.square_width
        if not (0 <= row < width and 0 <= col < width):
            raise DecodeError(f"Share ({row}, {col}) out of range for width {width}")
        return self.data_square[row * width + col]


class ODSCell(BaseModel):
    """Display identifier and color for one share."""

    id: str
    rgb: RGB

    @field_validator("rgb")
    @classmethod
    def validate_rgb(cls, v):
        """Each color component must fit in a byte."""
        if any(not 0 <= component <= 255 for component in v):
            raise ValueError(f"RGB components must be in 0-255: {v}")
        return v


class ODS(BaseModel):
    """Original data square for one block height."""

    height: int = Field(ge=0)
    cells: list[list[ODSCell]]

    @property
    def width(self) -> int:
        return len(self.cells)

    @property
    def cell_count(self) -> int:
        return sum(len(row) for row in self.cells)

    def identifiers(self) -> set[str]:
        """Distinct cell identifiers present in the square."""
        return {cell.id for row in self.cells for cell in row}
