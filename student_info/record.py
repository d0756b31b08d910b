"""
record.py - one student's data and its line format

A record is stored as a single line: roll no, name, department, email and
phone joined by the delimiter. Values are written as-is, so a value that
contains the delimiter or a line break will not survive a reload.
"""

from dataclasses import dataclass, astuple
from typing import List

from .config import DELIMITER, FIELD_COUNT

SEPARATOR_LINE = "-------------------"


class MalformedLineError(ValueError):
    """Raised by strict parsing when a stored line is not a valid record."""


@dataclass
class Record:
    roll_no: int = 0
    name: str = ""
    department: str = ""
    email: str = ""
    phone: str = ""

    def serialize(self) -> str:
        return DELIMITER.join(str(v) for v in astuple(self)) + "\n"

    @classmethod
    def parse(cls, line: str, strict: bool = False) -> "Record":
        """
        Build a Record from one stored line.

        A line without exactly five parts, or whose roll no is not a
        number, yields a blank Record (roll no 0, empty text). With
        strict=True a MalformedLineError is raised instead.
        """
        parts = line.rstrip("\r\n").split(DELIMITER)
        if len(parts) != FIELD_COUNT:
            if strict:
                raise MalformedLineError(f"expected {FIELD_COUNT} fields, got {len(parts)}: {line!r}")
            return cls()
        try:
            roll_no = int(parts[0])
        except ValueError:
            if strict:
                raise MalformedLineError(f"roll no is not a number: {parts[0]!r}")
            return cls()
        return cls(roll_no, parts[1], parts[2], parts[3], parts[4])

    def display(self) -> str:
        lines: List[str] = [
            f"Roll No: {self.roll_no}",
            f"Name: {self.name}",
            f"Department: {self.department}",
            f"Email: {self.email}",
            f"Phone: {self.phone}",
            SEPARATOR_LINE,
        ]
        return "\n".join(lines)
