import logging
import os

# Constants
DATA_FILE = "students.txt"
EXPORT_DIR = "exports"

DELIMITER = ","
FIELD_COUNT = 5

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
LOG_LEVEL = logging.WARNING


def export_path(filename: str) -> str:
    return os.path.join(EXPORT_DIR, filename)
