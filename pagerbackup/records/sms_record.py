"""
pagerbackup/records/sms_record.py
Records of the "SMS Messages" database.

FIELD TYPES:
  2  phone number of the other party
  3  message body
  4  header block, at least 29 bytes:
       byte  0       direction flag (0 received, 1 sent)
       bytes 13..20  sent time, epoch ms
       bytes 21..28  received time, epoch ms

The contact name is not stored in the record; organize() resolves it from
the address book by number.
"""

from typing import Optional

from pagerbackup.models.codec import (
    FieldDecodeError,
    decode_text,
    decode_timestamp,
    format_timestamp,
    sanitize_phone,
)
from pagerbackup.models.record import Record

FIELD_NUMBER = 2
FIELD_TEXT   = 3
FIELD_HEADER = 4

HEADER_MIN_LEN = 29
SENT_OFFSET    = 13
RECV_OFFSET    = 21

DIRECTION = {0: 'Received', 1: 'Sent'}


class SMSMessage(Record):
    """One SMS, sent or received."""

    LAYOUT = {
        'direction':   'Direction',
        FIELD_NUMBER:  'Number',
        'name':        'Name',
        FIELD_HEADER:  'Sent',
        'received':    'Received',
        FIELD_TEXT:    'Text',
    }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sent_ms:      Optional[int] = None
        self.received_ms:  Optional[int] = None
        self.contact_name: str           = ''

    @property
    def number(self) -> str:
        return self._store.get(FIELD_NUMBER)

    @property
    def text(self) -> str:
        return self._store.get(FIELD_TEXT)

    @property
    def direction(self) -> str:
        return self._store.get('direction')

    def _decode(self, field_type: int, data: bytes) -> Optional[str]:
        if field_type == FIELD_NUMBER:
            return sanitize_phone(decode_text(data))
        if field_type == FIELD_TEXT:
            return self._multiline(data)
        if field_type == FIELD_HEADER:
            return self._decode_header(data)
        self._ignore(field_type)
        return None

    def _decode_header(self, data: bytes) -> str:
        if len(data) < HEADER_MIN_LEN:
            raise FieldDecodeError(f"SMS header of {len(data)} bytes")
        sent     = decode_timestamp(data, SENT_OFFSET)
        received = decode_timestamp(data, RECV_OFFSET)
        self.sent_ms     = sent
        self.received_ms = received
        self._store.set_derived('direction', DIRECTION.get(data[0], f"Unknown ({data[0]})"))
        self._store.set_derived('received', format_timestamp(received))
        return format_timestamp(sent)

    def set_contact_name(self, name: str) -> None:
        self.contact_name = name
        self._store.set_derived('name', name)

    def sort_key(self) -> tuple:
        ts = self.sent_ms if self.sent_ms is not None else self.received_ms
        return (ts if ts is not None else 0, self.uid)
