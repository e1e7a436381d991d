from __future__ import annotations

NUL = b"\x00"


def trim_frame(raw: bytes | bytearray | memoryview) -> bytes:
    """Strip the trailing NUL padding some devices append to a response."""
    return bytes(raw).rstrip(NUL)


def frame_preview(raw: bytes | bytearray | memoryview, limit: int = 64) -> str:
    data = bytes(raw)
    if limit <= 0:
        return ""
    preview = data[:limit].decode("utf-8", errors="replace")
    if len(data) > limit:
        preview += f"... (+{len(data) - limit} bytes)"
    return preview
