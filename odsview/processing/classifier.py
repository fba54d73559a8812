"""Share classification: namespace to display label and color."""

import base64
import hashlib

from odsview.models.namespace import (
    MIN_SECONDARY_RESERVED,
    PAY_FOR_BLOB,
    PRIMARY_RESERVED_PADDING,
    TAIL_PADDING,
    TRANSACTION,
    Namespace,
)
from odsview.models.share import Share
from odsview.models.square import RGB, ODSCell

# Checked in order, first match wins
RESERVED_LABELS: tuple[tuple[Namespace, str], ...] = (
    (TRANSACTION, "TRANSACTION"),
    (PAY_FOR_BLOB, "PAY_FOR_BLOB"),
    (PRIMARY_RESERVED_PADDING, "PRIMARY_RESERVED_PADDING"),
    (MIN_SECONDARY_RESERVED, "MIN_SECONDARY_RESERVED"),
    (TAIL_PADDING, "TAIL_PADDING_NAMESPACE"),
)


def namespace_color(namespace_id: bytes) -> RGB:
    """Derive a stable color from namespace id bytes.

    The first three bytes of the SHA3-256 digest become the R, G and B
    components, so equal ids always share a color.
    """
    digest = hashlib.sha3_256(namespace_id).digest()
    return (digest[0], digest[1], digest[2])


def encode_namespace_id(namespace_id: bytes) -> str:
    """Encode raw namespace id bytes as standard base64."""
    return base64.b64encode(namespace_id).decode("ascii")


def namespace_label(namespace: Namespace) -> str:
    """Return the reserved label for a namespace, or its base64-encoded id."""
    for reserved, label in RESERVED_LABELS:
        if namespace == reserved:
            return label
    return encode_namespace_id(namespace.id)


def classify(share: Share) -> ODSCell:
    """Classify a share into a display cell.

    Only the namespace is inspected, never the payload.
    """
    namespace = share.namespace
    return ODSCell(id=namespace_label(namespace), rgb=namespace_color(namespace.id))
