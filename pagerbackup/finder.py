"""
pagerbackup/finder.py
Lookups between record kinds of one backup.

Records refer to each other by embedded values, not by uid: a task holds a
time-zone id, a message or call holds a phone number. Finder reads the
backup's views and never modifies them. Use it after every record has
been decoded; PagerBackup.organize() does.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pagerbackup.databases import RecordKind
from pagerbackup.models.codec import phone_digits
from pagerbackup.models.record import Record
from pagerbackup.records import Contact, TimeZoneEntry

if TYPE_CHECKING:
    from pagerbackup.backup import PagerBackup

# Numbers this long compare on their trailing digits, so +1 555 010 0001
# matches 5550100001
SIGNIFICANT_DIGITS = 10


def _same_number(a: str, b: str) -> bool:
    if not a or not b:
        return False
    if len(a) >= SIGNIFICANT_DIGITS and len(b) >= SIGNIFICANT_DIGITS:
        return a[-SIGNIFICANT_DIGITS:] == b[-SIGNIFICANT_DIGITS:]
    return a == b


class Finder:

    def __init__(self, backup: "PagerBackup"):
        self.backup = backup

    def find_time_zone(self, zone_id: Optional[int]) -> Optional[TimeZoneEntry]:
        if zone_id is None:
            return None
        for entry in self.backup.time_zones():
            if entry.zone_id == zone_id:
                return entry
        return None

    def find_time_zone_by_id(self, zone_id: Optional[int]) -> Optional[str]:
        """Name of the time zone with this id, or None."""
        entry = self.find_time_zone(zone_id)
        return entry.name if entry is not None else None

    def find_contact_by_number(self, number: str) -> Optional[Contact]:
        wanted = phone_digits(number)
        if not wanted:
            return None
        for contact in self.backup.contacts():
            for candidate in contact.phone_numbers():
                if _same_number(wanted, phone_digits(candidate)):
                    return contact
        return None

    def find_contact_name_by_number(self, number: str) -> Optional[str]:
        contact = self.find_contact_by_number(number)
        if contact is None or not contact.display_name:
            return None
        return contact.display_name

    def find_by_uid(self, uid: int, kind: Optional[RecordKind] = None) -> Optional[Record]:
        """
        First record with this uid, in one kind or across the typed kinds.
        uids repeat across databases, so pass kind when it is known.
        """
        if kind is not None:
            kinds = [RecordKind(kind)]
        else:
            kinds = [k for k in RecordKind if k is not RecordKind.UNRECOGNIZED]
        for k in kinds:
            for record in self.backup.records_of(k):
                if record.uid == uid:
                    return record
        return None
