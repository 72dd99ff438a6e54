"""
pagerbackup/records/unrecognized_record.py
Catch-all for records whose database index is out of range or whose
database name is not in the recognized table. Every field is kept
verbatim so nothing in the backup is silently lost.
"""

from typing import Optional

from pagerbackup.models.codec import verbatim
from pagerbackup.models.record import Record


class UnrecognizedRecord(Record):

    def _decode(self, field_type: int, data: bytes) -> Optional[str]:
        return verbatim(data)

    def sort_key(self) -> tuple:
        return (self.uid,)
