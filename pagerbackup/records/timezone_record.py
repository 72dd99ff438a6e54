"""
pagerbackup/records/timezone_record.py
Records of the "Time Zones" database. Tasks refer to these by zone_id.
"""

from typing import Optional

from pagerbackup.models.codec import decode_int, decode_text, format_offset
from pagerbackup.models.record import Record

FIELD_NAME   = 1
FIELD_ID     = 2
FIELD_OFFSET = 3


class TimeZoneEntry(Record):

    LAYOUT = {
        FIELD_ID:     'ID',
        FIELD_NAME:   'Name',
        FIELD_OFFSET: 'Offset',
    }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.zone_id:        Optional[int] = None
        self.offset_minutes: int           = 0

    @property
    def name(self) -> str:
        return self._store.get(FIELD_NAME)

    def _decode(self, field_type: int, data: bytes) -> Optional[str]:
        if field_type == FIELD_NAME:
            return decode_text(data)
        if field_type == FIELD_ID:
            self.zone_id = decode_int(data)
            return str(self.zone_id)
        if field_type == FIELD_OFFSET:
            self.offset_minutes = decode_int(data, signed=True)
            return format_offset(self.offset_minutes)
        self._ignore(field_type)
        return None

    def sort_key(self) -> tuple:
        return (self.offset_minutes, self.name.casefold(), self.uid)
