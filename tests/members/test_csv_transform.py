from __future__ import annotations

from datetime import date

import pytest

from roster_tracker.core.enums import IssueSeverity
from roster_tracker.core.exceptions import CsvFormatError
from roster_tracker.members.csv_transform import EXPORT_COLUMNS, export_members, parse_members
from roster_tracker.members.model import Member

HEADER = "name,birthday,phone,email,tag,gender,isTeenager,isBaptized,hasTakenCommunion"


def test_export_writes_header_and_literal_booleans():
    members = [
        Member(member_id=1, name="Ann", gender="female", is_teenager=False),
        Member(member_id=2, name="Tom", birthday=date(2001, 5, 1), gender="male", is_teenager=True),
    ]

    lines = export_members(members).splitlines()

    assert lines[0] == HEADER
    assert lines[1] == "Ann,,,,,female,false,false,false"
    assert lines[2] == "Tom,2001-05-01,,,,male,true,false,false"
    assert len(lines) == 3


def test_export_of_no_members_is_header_only():
    assert export_members([]).splitlines() == [",".join(EXPORT_COLUMNS)]


def test_export_then_parse_reproduces_members():
    members = [
        Member(
            member_id=7,
            name="Smith, John",
            birthday=date(1990, 12, 31),
            phone="+1 555 0100",
            email="john@example.com",
            tag="choir",
            gender="male",
            is_teenager=False,
            is_baptized=True,
            has_taken_communion=True,
        ),
        Member(member_id=8, name="Zoë \"Z\" Ng", gender="female", is_teenager=True),
        Member(member_id=9, name=" Ann ", phone=" 555 ", tag="youth ", gender="female"),
    ]

    result = parse_members(export_members(members))

    assert result.issues == []
    assert result.payloads == [m.to_payload() for m in members]


def test_empty_gender_defaults_to_male_and_uppercase_true_is_false():
    text = "name,gender,isBaptized\nPeter,,TRUE\n"

    result = parse_members(text)

    assert len(result.payloads) == 1
    p = result.payloads[0]
    assert p.gender == "male"
    assert p.is_baptized is False
    assert not result.has_errors
    assert {(w.column, w.severity) for w in result.warnings} == {
        ("gender", IssueSeverity.WARNING),
        ("isBaptized", IssueSeverity.WARNING),
    }


def test_columns_are_matched_by_name_not_position():
    result = parse_members("tag,gender,name\nusher,female,Ann\n")

    p = result.payloads[0]
    assert (p.name, p.gender, p.tag) == ("Ann", "female", "usher")
    assert p.birthday is None and p.phone is None and p.email is None
    assert (p.is_teenager, p.is_baptized, p.has_taken_communion) == (False, False, False)
    assert result.issues == []


def test_missing_name_column_is_a_format_error():
    with pytest.raises(CsvFormatError):
        parse_members("gender,tag\nmale,x\n")


def test_empty_file_is_a_format_error():
    with pytest.raises(CsvFormatError):
        parse_members("   \n")


def test_row_errors_are_reported_per_row():
    text = "name,birthday,gender\nAnn,1990-01-01,female\n,1990-01-01,male\nTom,01/02/1990,other\n"

    result = parse_members(text)

    assert [p.name for p in result.payloads] == ["Ann"]
    assert result.has_errors
    assert {(e.row, e.column) for e in result.errors} == {(2, "name"), (3, "birthday")}
    assert [(w.row, w.column) for w in result.warnings] == [(3, "gender")]


def test_blank_rows_are_skipped_and_bom_is_ignored():
    text = "\ufeffname,gender\nAnn,female\n\n,\n"

    result = parse_members(text)

    assert [p.name for p in result.payloads] == ["Ann"]
    assert result.issues == []


def test_extra_values_are_warned_about():
    result = parse_members("name,gender\nAnn,female,surplus\n")

    assert result.payloads[0].name == "Ann"
    assert [w.row for w in result.warnings] == [1]


def test_unrecognized_gender_survives_export_then_parse():
    members = [
        Member(member_id=1, name="Ann", gender="female"),
        Member(member_id=2, name="Lee", gender="nonbinary", is_baptized=True),
    ]

    result = parse_members(export_members(members))

    assert not result.has_errors
    assert result.payloads == [m.to_payload() for m in members]
    assert [(w.row, w.column, w.severity) for w in result.warnings] == [(2, "gender", IssueSeverity.WARNING)]


def test_surrounding_whitespace_is_kept_but_blank_cells_are_empty():
    result = parse_members("name,phone,email,gender,isTeenager\n  Ann  , 555 ,   , Female , true \n")

    p = result.payloads[0]
    assert (p.name, p.phone, p.email) == ("  Ann  ", " 555 ", None)
    assert p.gender == "female"
    assert p.is_teenager is True
    assert result.issues == []
