"""Guild gearscore averaging over exported profile files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from . import markup
from .models import Profile
from .output import read_profile_json


@dataclass
class GearscoreSummary:
    guild_name: str
    members: int
    private: int
    average: Optional[int]

    def lines(self) -> List[str]:
        if self.average is None:
            return ["No gearscore values found"]
        return [
            f"Parsing for guild: {self.guild_name}",
            f"Found {self.members} members",
            f"Users with Private Data: {self.private}",
            f"Average gearscore: {self.average}",
        ]


def parse_papd(text: Optional[str]) -> Optional[int]:
    """Return the PAPD as an int, or ``None`` when hidden, empty or not a number."""
    value = (text or "").strip()
    if not value or value == markup.PRIVATE_SENTINEL:
        return None
    if not value.isdigit() or not value.isascii():
        return None
    return int(value)


def summarize(profiles: Iterable[Profile], guild_name: str = "") -> GearscoreSummary:
    """Average the numeric PAPD values; private or invalid ones are only counted."""
    values: List[int] = []
    private = 0
    for profile in profiles:
        gearscore = parse_papd(profile.family_info.papd)
        if gearscore is None:
            private += 1
        else:
            values.append(gearscore)

    average = sum(values) // len(values) if values else None
    return GearscoreSummary(
        guild_name=guild_name,
        members=len(values) + private,
        private=private,
        average=average,
    )


def iter_profile_files(folder: Union[str, Path]) -> List[Path]:
    """Every ``.json`` file below ``folder``, in a stable order."""
    found: List[Path] = []
    for root, dirs, files in os.walk(folder):
        dirs.sort()
        for name in sorted(files):
            if name.endswith(".json"):
                found.append(Path(root) / name)
    return found


def summarize_folder(folder: Union[str, Path]) -> GearscoreSummary:
    guild_name = Path(folder).resolve().name
    profiles = [read_profile_json(path) for path in iter_profile_files(folder)]
    return summarize(profiles, guild_name=guild_name)
