"""Profile JSON export/import and guild roster CSV files."""

from __future__ import annotations

import csv
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Sequence, Union

from .errors import ProfileDataError
from .models import GuildMember, Profile

PathLike = Union[str, Path]

ROSTER_HEADER = ["Nickname", "Ref"]


class ResultWriter(ABC):
    """Base interface for output adapters."""

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)

    @abstractmethod
    def write(self, payload: Any) -> None:
        """Persist payload to the writer's path."""


class JsonWriter(ResultWriter):
    def write(self, payload: Profile) -> None:
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(payload.to_dict(), handle, ensure_ascii=False, indent=2)


class CsvWriter(ResultWriter):
    def write(self, payload: Sequence[GuildMember]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerow(ROSTER_HEADER)
            for member in payload:
                writer.writerow([member.nickname, member.url])


# --------------------------------------------------------------------------- #
# Profiles
# --------------------------------------------------------------------------- #
def write_profile_json(profile: Profile, path: PathLike) -> None:
    JsonWriter(path).write(profile)


def read_profile_json(path: PathLike) -> Profile:
    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise ProfileDataError(str(path), str(exc)) from exc
    if not isinstance(data, dict):
        raise ProfileDataError(str(path), "expected a JSON object")
    return Profile.from_dict(data)


def export_debug_profile(profile: Profile, path: PathLike) -> bool:
    """Write the debug copy of ``profile``; a failed write is reported, not raised."""
    try:
        write_profile_json(profile, path)
    except OSError as exc:
        print(f"[Export] Could not write {path}: {exc}")
        return False
    return True


# --------------------------------------------------------------------------- #
# Rosters
# --------------------------------------------------------------------------- #
def write_roster_csv(members: Sequence[GuildMember], path: PathLike) -> None:
    CsvWriter(path).write(members)


def read_roster_csv(path: PathLike) -> List[GuildMember]:
    """Read ``Nickname,Ref`` rows, skipping the header and malformed rows."""
    members: List[GuildMember] = []
    with Path(path).open("r", newline="", encoding="utf-8") as handle:
        for index, row in enumerate(csv.reader(handle)):
            if index == 0 and row and row[0] == ROSTER_HEADER[0]:
                continue
            if len(row) < 2:
                print(f"[Roster] Skipping malformed row {index + 1}: {row}")
                continue
            members.append(GuildMember(nickname=row[0].strip(), url=row[1].strip()))
    return members
