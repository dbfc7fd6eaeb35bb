from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from ..common.validators import as_flag, optional_date, optional_text, require_gender, require_non_empty
from ..core.enums import Gender
from ..core.exceptions import ImportRejectedError, NotFoundError
from .csv_transform import RowIssue, export_members, parse_members
from .model import Member, MemberPayload
from .repository import MemberRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportOutcome:
    imported: int
    warnings: list[RowIssue] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "imported": self.imported,
            "message": f"Successfully imported {self.imported} members",
            "warnings": [w.to_dict() for w in self.warnings],
        }


class MemberService:
    """Use cases: manage member profiles and bulk CSV import/export."""

    def __init__(self, members: MemberRepository):
        self._members = members

    def list_members(self):
        return list(self._members.list_all())

    def list_roster(self):
        return list(self._members.list_roster())

    def build_payload(self, form: Mapping) -> MemberPayload:
        """Validate submitted form/JSON fields into a write payload.

        Blank optional fields become None ("unknown"), never a default value.
        """

        return MemberPayload(
            name=require_non_empty(form.get("name"), "Name"),
            birthday=optional_date(form.get("birthday"), "Birthday"),
            phone=optional_text(form.get("phone")),
            email=optional_text(form.get("email")),
            tag=optional_text(form.get("tag")),
            gender=require_gender(form.get("gender") or Gender.MALE.value).value,
            is_teenager=as_flag(form.get("isTeenager")),
            is_baptized=as_flag(form.get("isBaptized")),
            has_taken_communion=as_flag(form.get("hasTakenCommunion")),
        )

    def create_member(self, payload: MemberPayload) -> Member:
        member_id = self._members.create(payload)
        logger.info("Created member %s (%s)", member_id, payload.name)
        return Member.from_payload(member_id, payload)

    def update_member(self, member_id: int, payload: MemberPayload) -> Member:
        if not self._members.update(int(member_id), payload):
            raise NotFoundError("Member not found")
        logger.info("Updated member %s", member_id)
        return Member.from_payload(member_id, payload)

    def delete_member(self, member_id: int) -> None:
        if not self._members.delete_by_id(int(member_id)):
            raise NotFoundError("Member not found")
        logger.info("Deleted member %s", member_id)

    def export_csv(self) -> str:
        return export_members(self._members.list_all())

    def import_csv(self, text: str) -> ImportOutcome:
        """Parse and insert a roster CSV as a single batch.

        Any row error rejects the whole file before the store is touched; the
        batch insert itself is all-or-nothing as well.
        """

        result = parse_members(text)
        if result.has_errors:
            raise ImportRejectedError(
                f"Import rejected: {len(result.errors)} row error(s), nothing was imported",
                result.issues,
            )

        for w in result.warnings:
            logger.warning("Import row %s (%s): %s", w.row, w.column or "-", w.message)

        if not result.payloads:
            return ImportOutcome(imported=0, warnings=result.warnings)

        count = self._members.create_many(result.payloads)
        logger.info("Imported %s members", count)
        return ImportOutcome(imported=count, warnings=result.warnings)
