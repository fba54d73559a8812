"""Share model decoded from raw square bytes."""

from pydantic import BaseModel, ConfigDict

from odsview.constants import NAMESPACE_SIZE, SHARE_INFO_BYTE_OFFSET, SHARE_SIZE
from odsview.exceptions import DecodeError
from odsview.models.namespace import Namespace


class Share(BaseModel):
    """A single fixed-size share: namespace prefix followed by share data."""

    namespace: Namespace
    data: bytes

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_raw(cls, raw: bytes) -> "Share":
        """Decode a raw share.

        Only the namespace prefix is validated, the payload is kept as-is.

        Args:
            raw: Raw share bytes as stored in the square

        Returns:
            Decoded share

        Raises:
            DecodeError: If the share is truncated or the namespace is invalid
        """
        if len(raw) != SHARE_SIZE:
            raise DecodeError(
                f"Invalid share size: expected {SHARE_SIZE} bytes, got {len(raw)}"
            )
        namespace = Namespace.from_raw(raw[:NAMESPACE_SIZE])
        return cls(namespace=namespace, data=bytes(raw))

    @property
    def info_byte(self) -> int:
        return self.data[SHARE_INFO_BYTE_OFFSET]

    @property
    def share_version(self) -> int:
        return self.info_byte >> 1

    @property
    def is_sequence_start(self) -> bool:
        return bool(self.info_byte & 1)

    @property
    def payload(self) -> bytes:
        """Share bytes after the namespace and info byte."""
        return self.data[SHARE_INFO_BYTE_OFFSET + 1 :]
