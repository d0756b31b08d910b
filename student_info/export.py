"""
export.py - write student records out as CSV or PDF

PDF output uses reportlab.
"""

import csv
import logging
import os
from datetime import datetime
from typing import Iterable, Optional

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from .config import export_path
from .record import Record

logger = logging.getLogger(__name__)

FORMATS = ("csv", "pdf")
HEADERS = ["Roll No", "Name", "Department", "Email", "Phone"]


def _ensure_parent(path: str):
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)


def export_filename(fmt: str) -> str:
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format: {fmt!r} (expected csv or pdf)")
    return export_path(f"students_{datetime.now().strftime('%Y%m%d_%H%M%S')}.{fmt}")


def export_csv(records: Iterable[Record], path: str) -> str:
    _ensure_parent(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(HEADERS)
        for r in records:
            writer.writerow([r.roll_no, r.name, r.department, r.email, r.phone])
    logger.debug(f"CSV export written to {path}")
    return path


def export_pdf(records: Iterable[Record], path: str) -> str:
    _ensure_parent(path)
    c = canvas.Canvas(path, pagesize=letter)
    width, height = letter
    title = f"Student List - {datetime.now().strftime('%Y-%m-%d')}"
    c.setFont("Helvetica-Bold", 14)
    c.drawString(40, height - 50, title)
    c.setFont("Helvetica", 10)
    y = height - 80
    line_height = 14
    c.drawString(40, y, " | ".join(HEADERS))
    y -= line_height
    for r in records:
        row = f"{r.roll_no} | {r.name} | {r.department} | {r.email} | {r.phone}"
        c.drawString(40, y, row[:200])
        y -= line_height
        if y < 60:
            c.showPage()
            c.setFont("Helvetica", 10)
            y = height - 40
    c.save()
    logger.debug(f"PDF export written to {path}")
    return path


def export_records(records: Iterable[Record], fmt: str, path: Optional[str] = None) -> str:
    fmt = fmt.strip().lower()
    path = path or export_filename(fmt)
    try:
        if fmt == "csv":
            return export_csv(records, path)
        if fmt == "pdf":
            return export_pdf(records, path)
    except OSError as e:
        logger.error(f"Export to {path} failed: {e}")
        raise
    raise ValueError(f"Unknown format: {fmt!r} (expected csv or pdf)")
