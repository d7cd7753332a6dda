"""Collapse RCA records that share the same code."""
from typing import Dict, Iterable, Iterator, List, Optional

from ..schemas import RcaRecord


class RecordIndex:
    """Insertion-ordered map rca -> record with last-write-wins `put`.

    A key keeps the position of its first appearance; its value is replaced by
    every later record with the same rca (no field merge).
    """

    def __init__(self):
        self._records: Dict[str, RcaRecord] = {}

    def put(self, record: RcaRecord) -> bool:
        """Store `record`; returns True if it replaced an earlier one."""
        replaced = record.rca in self._records
        self._records[record.rca] = record
        return replaced

    def get(self, rca: str) -> Optional[RcaRecord]:
        return self._records.get(rca)

    def values(self) -> List[RcaRecord]:
        return list(self._records.values())

    def __contains__(self, rca: str) -> bool:
        return rca in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RcaRecord]:
        return iter(self._records.values())


def dedupe(records: Iterable[RcaRecord]) -> List[RcaRecord]:
    index = RecordIndex()
    for record in records:
        index.put(record)
    return index.values()
