"""
pagerbackup/records/memo_record.py
Records of the "Memos" database: a title and a free-text body.
"""

from typing import Optional

from pagerbackup.models.codec import decode_text
from pagerbackup.models.record import Record

FIELD_TITLE = 1
FIELD_BODY  = 2


class Memo(Record):

    LAYOUT = {
        FIELD_TITLE: 'Title',
        FIELD_BODY:  'Memo',
    }

    @property
    def title(self) -> str:
        return self._store.get(FIELD_TITLE)

    @property
    def body(self) -> str:
        return self._store.get(FIELD_BODY)

    def _decode(self, field_type: int, data: bytes) -> Optional[str]:
        if field_type == FIELD_TITLE:
            return decode_text(data)
        if field_type == FIELD_BODY:
            return self._multiline(data)
        self._ignore(field_type)
        return None

    def sort_key(self) -> tuple:
        return (self.title.casefold(), self.uid)
