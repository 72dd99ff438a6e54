"""
pagerbackup/models: record contract, field store, raw decoders.
"""

from pagerbackup.models.codec import PLACEHOLDER, FieldDecodeError
from pagerbackup.models.fields import FieldStore
from pagerbackup.models.record import Record

__all__ = [
    "PLACEHOLDER",
    "FieldDecodeError",
    "FieldStore",
    "Record",
]
