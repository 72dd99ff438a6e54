"""
pagerbackup/databases.py
Database name -> record kind table.

Names are matched exactly. Several names may share a kind; every name
maps to some kind, UNRECOGNIZED being the default. The table is
configuration: handsets and desktop-manager versions disagree on names,
so callers can replace it (see pagerbackup/config.py).
"""

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


class RecordKind(str, Enum):
    SMS          = 'sms'
    CONTACT      = 'contact'
    MEMO         = 'memo'
    TASK         = 'task'
    TIMEZONE     = 'timezone'
    CALLLOG      = 'calllog'
    UNRECOGNIZED = 'unrecognized'


DEFAULT_DATABASE_KINDS: Dict[str, RecordKind] = {
    'SMS Messages':    RecordKind.SMS,
    'Address Book':    RecordKind.CONTACT,
    'Quick Contacts':  RecordKind.CONTACT,
    'Memos':           RecordKind.MEMO,
    'Tasks':           RecordKind.TASK,
    'Time Zones':      RecordKind.TIMEZONE,
    'Phone Call Logs': RecordKind.CALLLOG,
}


def kind_for_database(
    name:  str,
    table: Optional[Mapping[str, RecordKind]] = None,
) -> RecordKind:
    table = DEFAULT_DATABASE_KINDS if table is None else table
    return table.get(name, RecordKind.UNRECOGNIZED)


def parse_database_kinds(mapping: Mapping[str, Any]) -> Dict[str, RecordKind]:
    """
    Build a table from a JSON mapping of database name -> kind string.
    Entries naming an unknown kind are skipped with a warning; anything
    other than a mapping gives the default table.
    """
    if not isinstance(mapping, Mapping):
        logger.warning(f"database_kinds is not an object ({type(mapping).__name__}); using defaults")
        return dict(DEFAULT_DATABASE_KINDS)
    table: Dict[str, RecordKind] = {}
    for name, kind in mapping.items():
        try:
            table[name] = RecordKind(kind)
        except ValueError:
            logger.warning(f"Ignoring database '{name}': unknown record kind {kind!r}")
    return table
