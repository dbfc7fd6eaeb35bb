from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Gender


@dataclass(frozen=True)
class MemberPayload:
    """Member fields written on insert/update (everything but the store key)."""

    name: str
    birthday: Optional[date] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    tag: Optional[str] = None
    gender: str = Gender.MALE.value
    is_teenager: bool = False
    is_baptized: bool = False
    has_taken_communion: bool = False


@dataclass(frozen=True)
class Member:
    """Domain entity: a person tracked by the organization.

    Only ``name`` is required; every other attribute is nullable and means
    "unknown" when missing.
    """

    member_id: int
    name: str
    birthday: Optional[date] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    tag: Optional[str] = None
    gender: str = Gender.MALE.value
    is_teenager: bool = False
    is_baptized: bool = False
    has_taken_communion: bool = False

    @classmethod
    def from_payload(cls, member_id: int, payload: MemberPayload) -> "Member":
        return cls(
            member_id=int(member_id),
            name=payload.name,
            birthday=payload.birthday,
            phone=payload.phone,
            email=payload.email,
            tag=payload.tag,
            gender=payload.gender,
            is_teenager=payload.is_teenager,
            is_baptized=payload.is_baptized,
            has_taken_communion=payload.has_taken_communion,
        )

    def to_payload(self) -> MemberPayload:
        return MemberPayload(
            name=self.name,
            birthday=self.birthday,
            phone=self.phone,
            email=self.email,
            tag=self.tag,
            gender=self.gender,
            is_teenager=self.is_teenager,
            is_baptized=self.is_baptized,
            has_taken_communion=self.has_taken_communion,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.member_id,
            "name": self.name,
            "birthday": self.birthday.strftime("%Y-%m-%d") if self.birthday else None,
            "phone": self.phone,
            "email": self.email,
            "tag": self.tag,
            "gender": self.gender,
            "isTeenager": self.is_teenager,
            "isBaptized": self.is_baptized,
            "hasTakenCommunion": self.has_taken_communion,
        }


@dataclass(frozen=True)
class RosterEntry:
    """Read-model for the attendance sheet (id, name, tag only)."""

    member_id: int
    name: str
    tag: Optional[str] = None

    def to_dict(self) -> dict:
        return {"id": self.member_id, "name": self.name, "tag": self.tag}
