"""Square processing: extraction and classification."""

from odsview.processing.classifier import (
    RESERVED_LABELS,
    classify,
    encode_namespace_id,
    namespace_color,
    namespace_label,
)
from odsview.processing.extractor import build_ods, validate_square_shape

__all__ = [
    "RESERVED_LABELS",
    "build_ods",
    "classify",
    "encode_namespace_id",
    "namespace_color",
    "namespace_label",
    "validate_square_shape",
]
