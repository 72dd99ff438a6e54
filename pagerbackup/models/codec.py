"""
pagerbackup/models/codec.py
Raw field decoders shared by every record variant.

IPD fields arrive as (type, bytes) pairs. Integers and timestamps are
little-endian; text is NUL-terminated and usually UTF-8, but older handsets
write Latin-1. Decoders raise FieldDecodeError on bytes they cannot make
sense of; Record.add_field turns that into a placeholder.
"""

from datetime import datetime, timezone
from typing import Optional, Union

PLACEHOLDER   = '[unreadable]'
INVALID_DATE  = 'INVALID_DATE'
DATE_FORMAT   = '%Y-%m-%d %H:%M:%S'

INT_SIZES     = (1, 2, 4, 8)
PREVIEW_BYTES = 64

RawData = Union[bytes, bytearray, memoryview, str]


class FieldDecodeError(ValueError):
    """Field bytes do not fit the layout expected for their type."""


def as_bytes(data: RawData) -> bytes:
    """
    Normalize a raw payload to bytes.
    Readers that hand over char arrays give str; each char is one byte.
    """
    if isinstance(data, str):
        return data.encode('latin-1')
    return bytes(data)


def decode_text(data: bytes, line_feed: Optional[str] = None) -> str:
    """
    Decode a NUL-terminated string field.
    Embedded NULs separate sub-values and become spaces. When line_feed
    is given, it becomes a newline before control characters are dropped.
    """
    raw = data.rstrip(b'\x00')
    try:
        text = raw.decode('utf-8', errors='strict')
    except UnicodeDecodeError:
        text = raw.decode('latin-1')
    text = text.replace('\x00', ' ')
    if line_feed and line_feed != '\n':
        text = text.replace('\r\n', '\n').replace(line_feed, '\n')
    return ''.join(c for c in text if c.isprintable() or c in '\n\r\t').strip()


def decode_int(data: bytes, signed: bool = False) -> int:
    if len(data) not in INT_SIZES:
        raise FieldDecodeError(f"integer field of {len(data)} bytes")
    return int.from_bytes(data, 'little', signed=signed)


def decode_timestamp(data: bytes, offset: int = 0) -> int:
    """Epoch milliseconds stored as an 8-byte little-endian integer."""
    chunk = data[offset:offset + 8]
    if len(chunk) != 8:
        raise FieldDecodeError(f"timestamp at offset {offset} is truncated")
    return int.from_bytes(chunk, 'little', signed=True)


def format_timestamp(epoch_ms: Optional[int]) -> str:
    if epoch_ms is None:
        return ''
    try:
        return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc).strftime(DATE_FORMAT)
    except (OSError, OverflowError, ValueError):
        return INVALID_DATE


def format_duration(seconds: int) -> str:
    if seconds <= 0:
        return '0s'
    h, rem = divmod(seconds, 3600)
    m, s   = divmod(rem, 60)
    if h:
        return f"{h}h {m}m {s}s"
    if m:
        return f"{m}m {s}s"
    return f"{s}s"


def format_offset(minutes: int) -> str:
    sign = '-' if minutes < 0 else '+'
    h, m = divmod(abs(minutes), 60)
    return f"UTC{sign}{h:02d}:{m:02d}"


def sanitize_phone(phone: str) -> str:
    return ''.join(c for c in (phone or '') if c.isdigit() or c in '+-() ')[:30]


def phone_digits(phone: str) -> str:
    return ''.join(c for c in (phone or '') if c.isdigit())


def hex_preview(data: bytes) -> str:
    preview = ' '.join(f"{b:02x}" for b in data[:PREVIEW_BYTES])
    return preview + ' ...' if len(data) > PREVIEW_BYTES else preview


def verbatim(data: bytes) -> str:
    """Best-effort rendering of a field whose meaning is unknown."""
    body = data.rstrip(b'\x00')
    if body and all(32 <= b < 127 or b in (9, 10, 13) for b in body):
        return body.decode('ascii')
    return hex_preview(data)
