"""
pagerbackup/records/calllog_record.py
Records of the "Phone Call Logs" database.

The handset writes the caller name (field 31) only when the number was in
the address book at call time. When it is missing, organize() fills
contact_name from the contacts in the same backup.
"""

from typing import Optional

from pagerbackup.models.codec import (
    PLACEHOLDER,
    decode_int,
    decode_text,
    decode_timestamp,
    format_duration,
    format_timestamp,
    sanitize_phone,
)
from pagerbackup.models.record import Record

FIELD_TYPE     = 2
FIELD_DURATION = 3
FIELD_DATE     = 4
FIELD_NUMBER   = 12
FIELD_NAME     = 31

CALL_TYPE = {
    0: 'Incoming', 1: 'Outgoing', 2: 'Missed', 3: 'Missed (Seen)',
}


class CallLog(Record):

    LAYOUT = {
        FIELD_DATE:     'Date',
        FIELD_TYPE:     'Type',
        FIELD_NUMBER:   'Number',
        FIELD_NAME:     'Name',
        FIELD_DURATION: 'Duration',
    }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.date_ms:      Optional[int] = None
        self.duration_sec: int           = 0
        self.contact_name: str           = ''
        self._recorded_name: str         = ''

    @property
    def number(self) -> str:
        return self._store.get(FIELD_NUMBER)

    @property
    def call_type(self) -> str:
        return self._store.get(FIELD_TYPE)

    def _decode(self, field_type: int, data: bytes) -> Optional[str]:
        if field_type == FIELD_DATE:
            self.date_ms = decode_timestamp(data)
            return format_timestamp(self.date_ms)
        if field_type == FIELD_TYPE:
            value = decode_int(data)
            return CALL_TYPE.get(value, f"Unknown ({value})")
        if field_type == FIELD_DURATION:
            self.duration_sec = decode_int(data)
            return format_duration(self.duration_sec)
        if field_type == FIELD_NUMBER:
            return sanitize_phone(decode_text(data))
        if field_type == FIELD_NAME:
            self._recorded_name = decode_text(data)
            self.contact_name   = self._recorded_name
            return self._recorded_name
        self._ignore(field_type)
        return None

    def set_contact_name(self, name: str) -> None:
        """Fill the name from the address book unless the handset recorded one."""
        if self._recorded_name:
            self.contact_name = self._recorded_name
            return
        self.contact_name = name
        # unreadable handset name: leave the placeholder in place
        if name or self._store.get(FIELD_NAME) != PLACEHOLDER:
            self._store.set_derived(FIELD_NAME, name)

    def sort_key(self) -> tuple:
        return (self.date_ms if self.date_ms is not None else 0, self.uid)
