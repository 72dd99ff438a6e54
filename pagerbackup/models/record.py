"""
pagerbackup/models/record.py
Abstract base class for every record decoded from an IPD database.

To add a new variant: subclass Record, declare LAYOUT (and MULTIPART if
some codes repeat), implement _decode() and sort_key(), then register the
class for a RecordKind in pagerbackup/backup.py.

Identity is the uid alone. Two records of any variant with the same uid
compare equal; uids are only unique within one database.
"""

import logging
import struct
from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Mapping, Optional, Tuple, Union

from pagerbackup.models.codec import (
    PLACEHOLDER,
    FieldDecodeError,
    RawData,
    as_bytes,
    decode_text,
)
from pagerbackup.models.fields import FieldStore

logger = logging.getLogger(__name__)

# Errors a malformed payload can raise inside a decoder
DECODE_ERRORS = (FieldDecodeError, ValueError, IndexError, UnicodeError, struct.error)


class Record(ABC):

    LAYOUT:    ClassVar[Dict[Union[int, str], str]] = {}
    MULTIPART: ClassVar[Dict[int, str]]             = {}

    def __init__(
        self,
        database_id:      int,
        database_version: int,
        uid:              int,
        length:           int,
        line_feed:        str = '\n',
    ):
        self._database_id      = database_id
        self._database_version = database_version
        self._uid              = uid
        self._length           = length
        self.line_feed         = line_feed
        self.ignored_fields    = 0
        self._store            = FieldStore(self.LAYOUT, self.MULTIPART)

    # ── METADATA ──────────────────────────────────────────────

    @property
    def database_id(self) -> int:
        return self._database_id

    @property
    def database_version(self) -> int:
        return self._database_version

    @property
    def uid(self) -> int:
        return self._uid

    @property
    def length(self) -> int:
        return self._length

    # ── FIELDS ────────────────────────────────────────────────

    def add_field(self, field_type: int, data: RawData) -> None:
        """
        Decode one raw field and store it.
        Malformed bytes store PLACEHOLDER instead of raising, so one bad
        field never stops the rest of the backup from decoding.
        """
        try:
            text = self._decode(field_type, as_bytes(data))
        except DECODE_ERRORS as e:
            logger.debug(
                f"{type(self).__name__} uid={self._uid}: field {field_type} "
                f"unreadable ({type(e).__name__})"
            )
            self._store.put(field_type, PLACEHOLDER)
            return
        if text is not None:
            self._store.put(field_type, text)

    def fields(self) -> Mapping[str, str]:
        """Read-only snapshot: display name -> decoded text."""
        return self._store.as_mapping()

    def field_names(self) -> Tuple[str, ...]:
        return self._store.names()

    def _ignore(self, field_type: int) -> None:
        self.ignored_fields += 1
        logger.debug(f"{type(self).__name__} uid={self._uid}: ignored field type {field_type}")

    def _multiline(self, data: bytes) -> str:
        return decode_text(data, self.line_feed)

    @abstractmethod
    def _decode(self, field_type: int, data: bytes) -> Optional[str]:
        """
        Return display text for the field, or None when nothing should be
        stored under field_type (ignored or kept only on attributes).
        """

    @abstractmethod
    def sort_key(self) -> tuple:
        """Total order used by PagerBackup.organize(). End with self.uid."""

    # ── IDENTITY ──────────────────────────────────────────────

    def __eq__(self, other):
        if isinstance(other, Record):
            return self._uid == other._uid
        return NotImplemented

    def __hash__(self):
        return hash(self._uid)

    def __repr__(self):
        return f"{type(self).__name__}(uid={self._uid}, database_id={self._database_id})"
