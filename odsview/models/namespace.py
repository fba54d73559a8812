"""Namespace model and the protocol's reserved namespaces."""

from pydantic import BaseModel, ConfigDict, Field

from odsview.constants import (
    NAMESPACE_ID_SIZE,
    NAMESPACE_SIZE,
    NAMESPACE_V0_ID_SIZE,
    NAMESPACE_V0_PREFIX_SIZE,
    NAMESPACE_VERSION_MAX,
    NAMESPACE_VERSION_ZERO,
)
from odsview.exceptions import DecodeError


class Namespace(BaseModel):
    """Namespace embedded at the front of every share.

    A namespace is a version byte followed by a 28 byte id. Only two
    versions exist on the wire:

    - version 0: user and primary reserved namespaces, the id must start
      with 18 zero bytes
    - version 255: secondary reserved namespaces, the id is 27 ``0xff``
      bytes followed by one distinguishing byte
    """

    version: int = Field(ge=0, le=255)
    id: bytes

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_raw(cls, raw: bytes) -> "Namespace":
        """Parse a namespace from its 29 byte wire form.

        Args:
            raw: Version byte followed by the namespace id

        Returns:
            Parsed namespace

        Raises:
            DecodeError: If the size, version or id layout is invalid
        """
        if len(raw) != NAMESPACE_SIZE:
            raise DecodeError(
                f"Invalid namespace size: expected {NAMESPACE_SIZE} bytes, got {len(raw)}"
            )

        version = raw[0]
        namespace_id = bytes(raw[1:])

        if version == NAMESPACE_VERSION_ZERO:
            if any(namespace_id[:NAMESPACE_V0_PREFIX_SIZE]):
                raise DecodeError(
                    f"Invalid v0 namespace: first {NAMESPACE_V0_PREFIX_SIZE} id bytes must be zero"
                )
        elif version == NAMESPACE_VERSION_MAX:
            if namespace_id[:-1] != b"\xff" * (NAMESPACE_ID_SIZE - 1):
                raise DecodeError(
                    "Invalid v255 namespace: only the last id byte may differ from 0xff"
                )
        else:
            raise DecodeError(f"Unsupported namespace version: {version}")

        return cls(version=version, id=namespace_id)

    def as_bytes(self) -> bytes:
        """Return the 29 byte wire form."""
        return bytes([self.version]) + self.id


def namespace_v0(suffix: bytes) -> Namespace:
    """Build a version 0 namespace from its user-controlled id suffix."""
    if len(suffix) > NAMESPACE_V0_ID_SIZE:
        raise DecodeError(
            f"v0 namespace id suffix too long: {len(suffix)} > {NAMESPACE_V0_ID_SIZE}"
        )
    return Namespace(
        version=NAMESPACE_VERSION_ZERO,
        id=suffix.rjust(NAMESPACE_ID_SIZE, b"\x00"),
    )


def namespace_v255(last_byte: int) -> Namespace:
    """Build a version 255 namespace from its distinguishing last byte."""
    return Namespace(
        version=NAMESPACE_VERSION_MAX,
        id=b"\xff" * (NAMESPACE_ID_SIZE - 1) + bytes([last_byte]),
    )


# Primary reserved namespaces
TRANSACTION = namespace_v0(b"\x01")
PAY_FOR_BLOB = namespace_v0(b"\x04")
PRIMARY_RESERVED_PADDING = namespace_v0(b"\xff")

# Secondary reserved namespaces
MIN_SECONDARY_RESERVED = namespace_v255(0x00)
TAIL_PADDING = namespace_v255(0xFE)
PARITY_SHARE = namespace_v255(0xFF)
