"""Project-wide constants (stream sizes, default locations, ports)."""

STREAM_PIECE_SIZE_BYTES: int = 64 * 1024  # 64 KiB per streamed piece

DEFAULT_STORE_DIRECTORY: str = "files"

DEFAULT_HOST: str = "0.0.0.0"

DEFAULT_PORT: int = 5000

DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 30.0

# MIME families that may be fetched through /files/{fileName}
SERVABLE_MIME_FAMILIES = frozenset({"text", "image"})
