"""
store.py - ordered, file-backed collection of student records

The whole list is loaded once when the Store is created and the backing
file is rewritten in full after every add, update and delete.
"""

import logging
import os
from typing import Iterator, List, Optional

from .record import Record, MalformedLineError


class StudentInfoError(Exception):
    pass


NOT_FOUND_MESSAGE = "Student not found!"


class RecordNotFoundError(StudentInfoError):
    def __init__(self, roll_no: int):
        super().__init__(NOT_FOUND_MESSAGE)
        self.roll_no = roll_no


class NoRecordsError(StudentInfoError):
    def __init__(self):
        super().__init__("No records found!")


# -------------------------
# Persistence + CRUD
# -------------------------
class Store:
    def __init__(self, path: str):
        self.path = path
        self.logger = logging.getLogger(__name__)
        self.records: List[Record] = []
        self.load()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def load(self):
        self.records.clear()
        if not os.path.exists(self.path):
            self.logger.debug(f"No backing file at {self.path}, starting empty")
            return
        with open(self.path, "rb") as f:
            for lineno, raw in enumerate(f, start=1):
                # only a bare line break counts as empty; "\r\n" loads as a blank record
                if raw == b"\n":
                    continue
                try:
                    record = Record.parse(raw.decode("utf-8"), strict=True)
                except (UnicodeDecodeError, MalformedLineError) as e:
                    self.logger.warning(f"{self.path}:{lineno}: malformed line loaded as a blank record ({e})")
                    record = Record()
                self.records.append(record)
        self.logger.debug(f"Loaded {len(self.records)} records from {self.path}")

    def _encode(self) -> bytes:
        text = "".join(record.serialize() for record in self.records)
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as e:
            self.logger.warning(f"Unencodable characters replaced with '?' when writing {self.path}: {e}")
            return text.encode("utf-8", errors="replace")

    def persist(self):
        data = self._encode()
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        try:
            with open(self.path, "wb") as f:
                f.write(data)
        except OSError as e:
            self.logger.error(f"Could not write {self.path}: {e}")
            raise
        self.logger.debug(f"Wrote {len(self.records)} records to {self.path}")

    def _index_of(self, roll_no: int) -> Optional[int]:
        for i, record in enumerate(self.records):
            if record.roll_no == roll_no:
                return i
        return None

    def add(self, roll_no: int, name: str, department: str, email: str, phone: str) -> Record:
        record = Record(roll_no, name, department, email, phone)
        self.records.append(record)
        self.persist()
        return record

    def find_by_roll(self, roll_no: int) -> Optional[Record]:
        i = self._index_of(roll_no)
        return self.records[i] if i is not None else None

    def view(self) -> List[Record]:
        if not self.records:
            raise NoRecordsError()
        return list(self.records)

    def update_name(self, roll_no: int, new_name: str) -> Record:
        record = self.find_by_roll(roll_no)
        if record is None:
            raise RecordNotFoundError(roll_no)
        record.name = new_name
        self.persist()
        return record

    def delete(self, roll_no: int) -> Record:
        i = self._index_of(roll_no)
        if i is None:
            raise RecordNotFoundError(roll_no)
        record = self.records.pop(i)
        self.persist()
        return record

    # Search helpers
    def search_by_name(self, fragment: str) -> List[Record]:
        needle = fragment.strip().lower()
        return [r for r in self.records if needle in r.name.lower()]
