"""
pagerbackup/records/task_record.py
Records of the "Tasks" database.

Field 16 carries a numeric time-zone id, not a name. The id is kept on
Task.time_zone; PagerBackup.organize() looks it up in the "Time Zones"
database and stores the zone name for display under the same field.
"""

from typing import Optional

from pagerbackup.models.codec import (
    decode_int,
    decode_text,
    decode_timestamp,
    format_timestamp,
)
from pagerbackup.models.record import Record

FIELD_SUMMARY   = 2
FIELD_NOTES     = 3
FIELD_DUE       = 5
FIELD_STATUS    = 9
FIELD_PRIORITY  = 10
FIELD_TIME_ZONE = 16

STATUS = {
    0: 'Not Started', 1: 'In Progress', 2: 'Completed',
    3: 'Waiting',     4: 'Deferred',
}
PRIORITY = {0: 'High', 1: 'Normal', 2: 'Low'}


class Task(Record):

    LAYOUT = {
        FIELD_SUMMARY:   'Summary',
        FIELD_STATUS:    'Status',
        FIELD_PRIORITY:  'Priority',
        FIELD_DUE:       'Due',
        FIELD_TIME_ZONE: 'Time Zone',
        FIELD_NOTES:     'Notes',
    }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.time_zone:      Optional[int] = None
        self.time_zone_name: str           = ''
        self.due_ms:         Optional[int] = None

    @property
    def summary(self) -> str:
        return self._store.get(FIELD_SUMMARY)

    def _decode(self, field_type: int, data: bytes) -> Optional[str]:
        if field_type == FIELD_SUMMARY:
            return decode_text(data)
        if field_type == FIELD_NOTES:
            return self._multiline(data)
        if field_type == FIELD_DUE:
            self.due_ms = decode_timestamp(data)
            return format_timestamp(self.due_ms)
        if field_type == FIELD_STATUS:
            value = decode_int(data)
            return STATUS.get(value, f"Unknown ({value})")
        if field_type == FIELD_PRIORITY:
            value = decode_int(data)
            return PRIORITY.get(value, f"Unknown ({value})")
        if field_type == FIELD_TIME_ZONE:
            self.time_zone = decode_int(data)
            return None
        self._ignore(field_type)
        return None

    def set_time_zone_name(self, name: str) -> None:
        self.time_zone_name = name
        # unreadable id: leave the placeholder in place
        if self.time_zone is not None:
            self._store.set_derived(FIELD_TIME_ZONE, name)

    def sort_key(self) -> tuple:
        return (self.summary.casefold(), self.uid)
