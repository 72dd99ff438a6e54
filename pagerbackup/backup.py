"""
pagerbackup/backup.py
In-memory model of one IPD backup.

The byte-stream reader drives it:
  1. add_database(name) for every database header, in stream order
  2. create_record(...) for every record header, then add_field(...) on the
     returned record for each of its fields
  3. set_error_flag() whenever it skips a corrupt region
  4. organize() once, after the whole stream has been read

Consumers then read the per-kind views, which are sorted tuples.

Malformed input never raises here: out-of-range database indexes and
unknown database names give UnrecognizedRecord, bad field bytes give
placeholder text. were_errors() is the only failure signal.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from pagerbackup.databases import (
    RecordKind,
    kind_for_database,
    parse_database_kinds,
)
from pagerbackup.finder import Finder
from pagerbackup.models.record import Record
from pagerbackup.records import (
    CallLog,
    Contact,
    Memo,
    SMSMessage,
    Task,
    TimeZoneEntry,
    UnrecognizedRecord,
)

logger = logging.getLogger(__name__)

RECORD_CLASSES: Dict[RecordKind, Type[Record]] = {
    RecordKind.SMS:          SMSMessage,
    RecordKind.CONTACT:      Contact,
    RecordKind.MEMO:         Memo,
    RecordKind.TASK:         Task,
    RecordKind.TIMEZONE:     TimeZoneEntry,
    RecordKind.CALLLOG:      CallLog,
    RecordKind.UNRECOGNIZED: UnrecognizedRecord,
}


class PagerBackup:
    """
    Owner of the database names and of one record list per kind.

    Usage:
        backup = PagerBackup(version=2, line_feed='\\n')
        backup.add_database('SMS Messages')
        rec = backup.create_record(0, 4, 101, 30)
        rec.add_field(3, b'hello\\x00')
        backup.organize()
        backup.sms_records()
    """

    def __init__(
        self,
        version:        int = 2,
        line_feed:      str = '\n',
        database_kinds: Optional[Mapping[str, RecordKind]] = None,
    ):
        self._version        = version
        self._line_feed      = line_feed
        self._database_kinds = database_kinds
        self._databases:  List[str] = []
        self._records:    Dict[RecordKind, List[Record]] = {kind: [] for kind in RecordKind}
        self._error_flag  = False

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "PagerBackup":
        """Build from a dict returned by pagerbackup.config.load_config()."""
        kinds = config.get('database_kinds')
        return cls(
            version        = config.get('version', 2),
            line_feed      = config.get('line_feed', '\n'),
            database_kinds = parse_database_kinds(kinds) if kinds is not None else None,
        )

    @property
    def version(self) -> int:
        return self._version

    @property
    def line_feed(self) -> str:
        return self._line_feed

    # ── POPULATION ────────────────────────────────────────────

    def add_database(self, name: str) -> None:
        """Append a database name; its index is its position. Duplicates are kept."""
        self._databases.append(name)

    def create_record(self, db_index: int, db_version: int, uid: int, length: int) -> Record:
        """
        Create the record for database db_index and file it under its kind.
        Indexes outside the known databases give an UnrecognizedRecord;
        record headers can run ahead of database headers in truncated files.
        """
        if db_index < 0 or db_index >= len(self._databases):
            logger.debug(
                f"Record uid={uid}: database index {db_index} outside "
                f"{len(self._databases)} known databases"
            )
            kind = RecordKind.UNRECOGNIZED
        else:
            kind = kind_for_database(self._databases[db_index], self._database_kinds)

        record = RECORD_CLASSES[kind](db_index, db_version, uid, length, self._line_feed)
        self._records[kind].append(record)
        return record

    def set_error_flag(self) -> None:
        if not self._error_flag:
            logger.warning("Backup contains corrupt regions; some records may be missing")
        self._error_flag = True

    def were_errors(self) -> bool:
        return self._error_flag

    # ── ORGANIZE ──────────────────────────────────────────────

    def organize(self) -> None:
        """
        Sort every record list and resolve cross-references.
        Call once after the last record is decoded. Rerunning gives the
        same order and the same resolved names.
        """
        for records in self._records.values():
            records.sort(key=lambda r: r.sort_key())

        finder = Finder(self)

        for task in self._records[RecordKind.TASK]:
            task.set_time_zone_name(finder.find_time_zone_by_id(task.time_zone) or '')

        for record in self._records[RecordKind.SMS] + self._records[RecordKind.CALLLOG]:
            record.set_contact_name(finder.find_contact_name_by_number(record.number) or '')

        summary = ', '.join(f"{kind}={n}" for kind, n in self.counts().items())
        logger.info(f"Organized {len(self._databases)} databases: {summary}")

    # ── VIEWS ─────────────────────────────────────────────────

    def database_names(self) -> Tuple[str, ...]:
        return tuple(self._databases)

    def records_of(self, kind: RecordKind) -> Tuple[Record, ...]:
        return tuple(self._records[RecordKind(kind)])

    def sms_records(self) -> Tuple[SMSMessage, ...]:
        return tuple(self._records[RecordKind.SMS])

    def contacts(self) -> Tuple[Contact, ...]:
        return tuple(self._records[RecordKind.CONTACT])

    def memos(self) -> Tuple[Memo, ...]:
        return tuple(self._records[RecordKind.MEMO])

    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._records[RecordKind.TASK])

    def time_zones(self) -> Tuple[TimeZoneEntry, ...]:
        return tuple(self._records[RecordKind.TIMEZONE])

    def call_logs(self) -> Tuple[CallLog, ...]:
        return tuple(self._records[RecordKind.CALLLOG])

    def unrecognized(self) -> Tuple[UnrecognizedRecord, ...]:
        return tuple(self._records[RecordKind.UNRECOGNIZED])

    def counts(self) -> Dict[str, int]:
        return {kind.value: len(records) for kind, records in self._records.items()}
