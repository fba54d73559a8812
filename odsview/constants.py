"""Share and namespace layout constants."""

# Every share in the square has the same fixed size
SHARE_SIZE = 512

# Namespace = 1 version byte + 28 id bytes
NAMESPACE_VERSION_SIZE = 1
NAMESPACE_ID_SIZE = 28
NAMESPACE_SIZE = NAMESPACE_VERSION_SIZE + NAMESPACE_ID_SIZE

# Version 0 ids only use the trailing 10 bytes, the rest must be zero
NAMESPACE_V0_ID_SIZE = 10
NAMESPACE_V0_PREFIX_SIZE = NAMESPACE_ID_SIZE - NAMESPACE_V0_ID_SIZE

NAMESPACE_VERSION_ZERO = 0
NAMESPACE_VERSION_MAX = 255

# Info byte directly follows the namespace
SHARE_INFO_BYTE_OFFSET = NAMESPACE_SIZE

DEFAULT_NODE_URL = "http://localhost:26658"
