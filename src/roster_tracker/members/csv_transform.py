"""CSV export/import of the member roster.

The header names below are a compatibility contract: exported files are read
back by the importer and by people in spreadsheets, so names and order must
not change.
"""
from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..core.constants import CSV_FALSE, CSV_TRUE, DEFAULT_IMPORT_GENDER
from ..core.enums import Gender, IssueSeverity
from ..core.exceptions import CsvFormatError
from .model import Member, MemberPayload

EXPORT_COLUMNS = [
    "name",
    "birthday",
    "phone",
    "email",
    "tag",
    "gender",
    "isTeenager",
    "isBaptized",
    "hasTakenCommunion",
]

_FLAG_COLUMNS = {
    "isTeenager": "is_teenager",
    "isBaptized": "is_baptized",
    "hasTakenCommunion": "has_taken_communion",
}


@dataclass(frozen=True)
class RowIssue:
    row: int
    column: Optional[str]
    message: str
    severity: IssueSeverity = IssueSeverity.ERROR

    def to_dict(self) -> dict:
        return {
            "row": self.row,
            "column": self.column,
            "message": self.message,
            "severity": self.severity.value,
        }


@dataclass(frozen=True)
class ImportResult:
    payloads: list[MemberPayload] = field(default_factory=list)
    issues: list[RowIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[RowIssue]:
        return [i for i in self.issues if i.severity == IssueSeverity.ERROR]

    @property
    def warnings(self) -> list[RowIssue]:
        return [i for i in self.issues if i.severity == IssueSeverity.WARNING]

    @property
    def has_errors(self) -> bool:
        return any(i.severity == IssueSeverity.ERROR for i in self.issues)


def _flag(value: bool) -> str:
    return CSV_TRUE if value else CSV_FALSE


def export_members(members: Iterable[Member]) -> str:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=EXPORT_COLUMNS)
    writer.writeheader()
    for m in members:
        writer.writerow(
            {
                "name": m.name,
                "birthday": format_iso_date(m.birthday),
                "phone": m.phone or "",
                "email": m.email or "",
                "tag": m.tag or "",
                "gender": m.gender,
                "isTeenager": _flag(m.is_teenager),
                "isBaptized": _flag(m.is_baptized),
                "hasTakenCommunion": _flag(m.has_taken_communion),
            }
        )
    return out.getvalue()


def _cell(row: dict, column: str, strip: bool = False) -> str:
    """Cell text, or "" when absent or blank. Non-blank text is kept as written
    unless ``strip`` is set."""
    value = row.get(column)
    if not isinstance(value, str) or not value.strip():
        return ""
    return value.strip() if strip else value


def _parse_row(row: dict, row_no: int) -> tuple[Optional[MemberPayload], list[RowIssue]]:
    issues: list[RowIssue] = []

    name = _cell(row, "name")
    if not name:
        issues.append(RowIssue(row_no, "name", "name is required"))

    birthday = None
    birthday_s = _cell(row, "birthday", strip=True)
    if birthday_s:
        try:
            birthday = parse_iso_date(birthday_s)
        except ValueError:
            issues.append(RowIssue(row_no, "birthday", f"invalid date {birthday_s!r}, expected YYYY-MM-DD"))

    gender_s = _cell(row, "gender")
    if not gender_s:
        gender = DEFAULT_IMPORT_GENDER
        issues.append(
            RowIssue(row_no, "gender", f"gender missing, defaulted to {DEFAULT_IMPORT_GENDER!r}", IssueSeverity.WARNING)
        )
    else:
        try:
            gender = Gender(gender_s.strip().lower()).value
        except ValueError:
            gender = gender_s
            issues.append(
                RowIssue(row_no, "gender", f"unrecognized gender {gender_s!r} kept as is", IssueSeverity.WARNING)
            )

    flags: dict[str, bool] = {}
    for column, attr in _FLAG_COLUMNS.items():
        raw = _cell(row, column, strip=True)
        flags[attr] = raw == CSV_TRUE
        # Only the exact lowercase literal counts as true.
        if raw and raw not in (CSV_TRUE, CSV_FALSE):
            issues.append(
                RowIssue(row_no, column, f"value {raw!r} is not 'true' or 'false', treated as false", IssueSeverity.WARNING)
            )

    if None in row:
        issues.append(
            RowIssue(row_no, None, f"{len(row[None])} extra value(s) beyond the header ignored", IssueSeverity.WARNING)
        )

    if any(i.severity == IssueSeverity.ERROR for i in issues):
        return None, issues

    payload = MemberPayload(
        name=name,
        birthday=birthday,
        phone=_cell(row, "phone") or None,
        email=_cell(row, "email") or None,
        tag=_cell(row, "tag") or None,
        gender=gender,
        **flags,
    )
    return payload, issues


def parse_members(text: str) -> ImportResult:
    """Parse CSV text into member insert payloads plus per-row issues.

    Columns are matched by header name, so their order does not matter and
    unknown columns are ignored. Raises CsvFormatError when the text is not a
    usable member CSV at all (no header, no ``name`` column, malformed CSV).
    """

    if text.startswith("\ufeff"):
        text = text[1:]
    if not text.strip():
        raise CsvFormatError("CSV file is empty")

    reader = csv.DictReader(io.StringIO(text, newline=""))
    try:
        header = [h.strip() if h else h for h in (reader.fieldnames or [])]
        if "name" not in header:
            raise CsvFormatError("CSV header must contain a 'name' column")
        reader.fieldnames = header

        payloads: list[MemberPayload] = []
        issues: list[RowIssue] = []
        for row_no, row in enumerate(reader, start=1):
            values = [v for k, v in row.items() if k is not None]
            if not any(isinstance(v, str) and v.strip() for v in values) and None not in row:
                continue
            payload, row_issues = _parse_row(row, row_no)
            issues.extend(row_issues)
            if payload is not None:
                payloads.append(payload)
    except csv.Error as e:
        raise CsvFormatError(f"Malformed CSV: {e}") from e

    return ImportResult(payloads=payloads, issues=issues)
