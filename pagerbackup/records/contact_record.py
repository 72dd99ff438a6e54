"""
pagerbackup/records/contact_record.py
Records of the address-book style databases ("Address Book", "Quick Contacts").

The name arrives as two fields of type 32 (first, then last) and is joined.
Several email fields are joined with ", ".
"""

from typing import List, Optional

from pagerbackup.models.codec import decode_text, sanitize_phone
from pagerbackup.models.record import Record

FIELD_EMAIL    = 1
FIELD_WORK     = 6
FIELD_HOME     = 7
FIELD_MOBILE   = 8
FIELD_PAGER    = 9
FIELD_PIN      = 10
FIELD_NAME     = 32
FIELD_COMPANY  = 33
FIELD_ADDRESS  = 35
FIELD_TITLE    = 55
FIELD_NOTES    = 64

PHONE_FIELDS     = (FIELD_WORK, FIELD_HOME, FIELD_MOBILE, FIELD_PAGER)
MULTILINE_FIELDS = (FIELD_ADDRESS, FIELD_NOTES)


class Contact(Record):

    LAYOUT = {
        FIELD_NAME:    'Name',
        FIELD_COMPANY: 'Company',
        FIELD_TITLE:   'Title',
        FIELD_EMAIL:   'Email',
        FIELD_WORK:    'Work Phone',
        FIELD_HOME:    'Home Phone',
        FIELD_MOBILE:  'Mobile Phone',
        FIELD_PAGER:   'Pager',
        FIELD_PIN:     'PIN',
        FIELD_ADDRESS: 'Address',
        FIELD_NOTES:   'Notes',
    }
    MULTIPART = {
        FIELD_NAME:  ' ',
        FIELD_EMAIL: ', ',
    }

    @property
    def name(self) -> str:
        return self._store.get(FIELD_NAME)

    @property
    def display_name(self) -> str:
        """Name, else company, else email."""
        for code in (FIELD_NAME, FIELD_COMPANY, FIELD_EMAIL):
            value = self._store.get(code)
            if value:
                return value
        return ''

    def phone_numbers(self) -> List[str]:
        return [self._store.get(c) for c in PHONE_FIELDS if self._store.get(c)]

    def _decode(self, field_type: int, data: bytes) -> Optional[str]:
        if field_type not in self.LAYOUT:
            self._ignore(field_type)
            return None
        if field_type in MULTILINE_FIELDS:
            return self._multiline(data)
        text = decode_text(data)
        if field_type in PHONE_FIELDS:
            return sanitize_phone(text)
        return text

    def sort_key(self) -> tuple:
        return (self.display_name.casefold(), self.uid)
