"""
pagerbackup/models/fields.py
Per-record field bag: field-type code -> decoded text.

Display order comes from the layout the record variant declares, never
from the order fields were appended. Codes outside the layout are shown
after the declared ones as "Field <code>".
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

Key = Union[int, str]


class FieldStore:

    def __init__(
        self,
        layout:    Mapping[Key, str],
        multipart: Optional[Mapping[int, str]] = None,
    ):
        # int keys are raw field codes, str keys are derived slots
        self._layout:    Dict[Key, str] = dict(layout)
        self._order:     Dict[Key, int] = {k: i for i, k in enumerate(self._layout)}
        self._multipart: Dict[int, str] = dict(multipart or {})
        self._values:    Dict[Key, str] = {}

    def put(self, code: int, text: str) -> None:
        """Store text for a field code. Multi-part codes accumulate."""
        sep      = self._multipart.get(code)
        existing = self._values.get(code)
        if sep is not None and existing:
            if text:
                self._values[code] = f"{existing}{sep}{text}"
            return
        self._values[code] = text

    def set_derived(self, slot: Key, text: str) -> None:
        """Replace a value computed after decoding. Empty text clears it."""
        if text:
            self._values[slot] = text
        else:
            self._values.pop(slot, None)

    def get(self, key: Key, default: str = '') -> str:
        return self._values.get(key, default)

    def __contains__(self, key: Key) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def name_of(self, key: Key) -> str:
        if key in self._layout:
            return self._layout[key]
        return f"Field {key}"

    def _sorted_keys(self) -> List[Key]:
        declared = sorted((k for k in self._values if k in self._order), key=self._order.__getitem__)
        extra    = sorted(k for k in self._values if k not in self._order and isinstance(k, int))
        return declared + extra

    def names(self) -> Tuple[str, ...]:
        return tuple(self.name_of(k) for k in self._sorted_keys())

    def as_mapping(self) -> Mapping[str, str]:
        return MappingProxyType({self.name_of(k): self._values[k] for k in self._sorted_keys()})
