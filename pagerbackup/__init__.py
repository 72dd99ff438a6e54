"""
pagerbackup: record model for IPD handset backups.

The byte-stream reader populates a PagerBackup; exporters read its views.
"""

from pagerbackup.backup import PagerBackup
from pagerbackup.databases import DEFAULT_DATABASE_KINDS, RecordKind, kind_for_database
from pagerbackup.finder import Finder
from pagerbackup.models import PLACEHOLDER, FieldStore, Record
from pagerbackup.records import (
    CallLog,
    Contact,
    Memo,
    SMSMessage,
    Task,
    TimeZoneEntry,
    UnrecognizedRecord,
)

__all__ = [
    "PagerBackup",
    "Finder",
    "RecordKind",
    "DEFAULT_DATABASE_KINDS",
    "kind_for_database",
    "PLACEHOLDER",
    "FieldStore",
    "Record",
    "CallLog",
    "Contact",
    "Memo",
    "SMSMessage",
    "Task",
    "TimeZoneEntry",
    "UnrecognizedRecord",
]
