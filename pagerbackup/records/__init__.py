"""
pagerbackup/records: concrete record variants, one module per database kind.
"""

from pagerbackup.records.calllog_record import CallLog
from pagerbackup.records.contact_record import Contact
from pagerbackup.records.memo_record import Memo
from pagerbackup.records.sms_record import SMSMessage
from pagerbackup.records.task_record import Task
from pagerbackup.records.timezone_record import TimeZoneEntry
from pagerbackup.records.unrecognized_record import UnrecognizedRecord

__all__ = [
    "CallLog",
    "Contact",
    "Memo",
    "SMSMessage",
    "Task",
    "TimeZoneEntry",
    "UnrecognizedRecord",
]
