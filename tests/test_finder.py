"""
tests/test_finder.py
Cross-reference lookups over a populated backup.
"""

import pytest

from pagerbackup.backup import PagerBackup
from pagerbackup.databases import RecordKind
from pagerbackup.finder import Finder


def _text(value: str) -> bytes:
    return value.encode('utf-8') + b'\x00'


def _int(value: int) -> bytes:
    return value.to_bytes(4, 'little')


@pytest.fixture
def backup():
    b = PagerBackup()
    b.add_database('Time Zones')
    b.add_database('Address Book')
    b.add_database('Memos')
    for uid, zone_id, name in [(1, 4, 'Eastern'), (2, 7, 'Pacific'), (3, 4, 'Duplicate')]:
        rec = b.create_record(0, 1, uid, 10)
        rec.add_field(2, _int(zone_id))
        rec.add_field(1, _text(name))
    ada = b.create_record(1, 1, 10, 10)
    ada.add_field(32, _text('Ada'))
    ada.add_field(7, _text('555-0100'))
    acme = b.create_record(1, 1, 11, 10)
    acme.add_field(33, _text('Acme'))
    acme.add_field(6, _text('+44 20 7946 0000'))
    b.create_record(2, 1, 10, 10).add_field(1, _text('Memo sharing uid 10'))
    return b


class TestTimeZones:

    def test_found(self, backup):
        assert Finder(backup).find_time_zone_by_id(7) == 'Pacific'

    def test_first_match_in_collection_order(self, backup):
        assert Finder(backup).find_time_zone_by_id(4) == 'Eastern'

    def test_missing(self, backup):
        assert Finder(backup).find_time_zone_by_id(99) is None

    def test_none_id(self, backup):
        assert Finder(backup).find_time_zone_by_id(None) is None

    def test_entry_returned(self, backup):
        entry = Finder(backup).find_time_zone(7)
        assert entry.uid == 2


class TestContacts:

    def test_exact_short_number(self, backup):
        assert Finder(backup).find_contact_name_by_number('5550100') == 'Ada'

    def test_formatting_ignored(self, backup):
        assert Finder(backup).find_contact_name_by_number('(555) 0100') == 'Ada'

    def test_trailing_digits_for_long_numbers(self, backup):
        contact = Finder(backup).find_contact_by_number('0044 2079460000')
        assert contact.display_name == 'Acme'

    def test_short_number_needs_exact_match(self, backup):
        assert Finder(backup).find_contact_by_number('0100') is None

    def test_empty_number(self, backup):
        assert Finder(backup).find_contact_by_number('') is None


class TestFindByUid:

    def test_kind_narrows_search(self, backup):
        rec = Finder(backup).find_by_uid(10, RecordKind.MEMO)
        assert rec.title == 'Memo sharing uid 10'

    def test_any_kind(self, backup):
        assert Finder(backup).find_by_uid(2).name == 'Pacific'

    def test_missing(self, backup):
        assert Finder(backup).find_by_uid(12345) is None
