"""
student_info - flat-file student record manager
"""

from .record import Record, MalformedLineError
from .store import Store, StudentInfoError, RecordNotFoundError, NoRecordsError

__version__ = "0.1.0"

__all__ = [
    "Record",
    "MalformedLineError",
    "Store",
    "StudentInfoError",
    "RecordNotFoundError",
    "NoRecordsError",
]
