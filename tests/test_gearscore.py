"""Tests for PAPD parsing and gearscore averaging."""

from __future__ import annotations

import json

import pytest

from bdoprofile import parse_papd, summarize
from bdoprofile.gearscore import summarize_folder
from bdoprofile.models import FamilyInfo, Profile


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", None),
        ("Privado", None),
        ("  Privado ", None),
        (None, None),
        ("0", 0),
        ("712", 712),
        (" 650 ", 650),
        ("abc", None),
        ("1.234", None),
        ("-5", None),
        ("٣", None),
    ],
)
def test_parse_papd(raw, expected):
    assert parse_papd(raw) == expected


def _profiles(*papds: str):
    return [Profile(family_info=FamilyInfo(papd=papd)) for papd in papds]


def test_private_values_are_excluded_from_the_denominator():
    summary = summarize(_profiles("700", "701", "Privado", "", "oops"), guild_name="Lumina")
    assert summary.members == 5
    assert summary.private == 3
    assert summary.average == 700


def test_no_numeric_values_reports_none():
    summary = summarize(_profiles("Privado", ""))
    assert summary.average is None
    assert summary.private == 2
    assert summary.lines() == ["No gearscore values found"]


def test_summary_lines():
    summary = summarize(_profiles("600", "Privado"), guild_name="Lumina")
    assert summary.lines() == [
        "Parsing for guild: Lumina",
        "Found 2 members",
        "Users with Private Data: 1",
        "Average gearscore: 600",
    ]


def test_summarize_folder_walks_json_files(tmp_path):
    guild = tmp_path / "Lumina"
    (guild / "nested").mkdir(parents=True)
    (guild / "a.json").write_text(json.dumps({"FamilyInfo": {"PAPD": "710"}}), encoding="utf-8")
    (guild / "nested" / "b.json").write_text(json.dumps({"FamilyInfo": {"PAPD": "Privado"}}), encoding="utf-8")
    (guild / "c.json").write_text(json.dumps({"FamilyInfo": {"PAPD": "705"}, "LifeSkills": None}), encoding="utf-8")
    (guild / "notes.txt").write_text("not a profile", encoding="utf-8")

    summary = summarize_folder(guild)
    assert summary.guild_name == "Lumina"
    assert summary.members == 3
    assert summary.private == 1
    assert summary.average == 707
