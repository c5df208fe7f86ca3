"""Shared dataclasses for scraped profiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class FamilyInfo:
    name: str = ""
    creation_date: str = ""
    guild: str = ""
    papd: str = ""
    energy: str = ""
    contribution: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "Name": self.name,
            "CreationDate": self.creation_date,
            "Guild": self.guild,
            "PAPD": self.papd,
            "Energy": self.energy,
            "Contribution": self.contribution,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FamilyInfo":
        data = data or {}
        return cls(
            name=_text(data.get("Name")),
            creation_date=_text(data.get("CreationDate")),
            guild=_text(data.get("Guild")),
            papd=_text(data.get("PAPD")),
            energy=_text(data.get("Energy")),
            contribution=_text(data.get("Contribution")),
        )


@dataclass
class LifeSkill:
    name: str = ""
    level_name: str = ""
    level_value: str = ""
    mastery: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "Name": self.name,
            "LevelName": self.level_name,
            "LevelInt": self.level_value,
            "Mastery": self.mastery,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LifeSkill":
        return cls(
            name=_text(data.get("Name")),
            level_name=_text(data.get("LevelName")),
            level_value=_text(data.get("LevelInt")),
            mastery=_text(data.get("Mastery")),
        )


@dataclass
class Character:
    name: str = ""
    character_class: str = ""
    level: str = ""
    is_main: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "Class": self.character_class,
            "Level": self.level,
            "IsMain": self.is_main,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Character":
        return cls(
            name=_text(data.get("Name")),
            character_class=_text(data.get("Class")),
            level=_text(data.get("Level")),
            is_main=bool(data.get("IsMain", False)),
        )


@dataclass
class Profile:
    """One family's scraped page: family block, life skills and characters."""

    family_info: FamilyInfo = field(default_factory=FamilyInfo)
    life_skills: List[LifeSkill] = field(default_factory=list)
    characters: List[Character] = field(default_factory=list)

    @property
    def main_character(self) -> Optional[Character]:
        for character in self.characters:
            if character.is_main:
                return character
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "FamilyInfo": self.family_info.to_dict(),
            "LifeSkills": [skill.to_dict() for skill in self.life_skills],
            "Characters": [character.to_dict() for character in self.characters],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        # Files written by older exporters carry null instead of empty lists.
        return cls(
            family_info=FamilyInfo.from_dict(data.get("FamilyInfo")),
            life_skills=[LifeSkill.from_dict(item) for item in data.get("LifeSkills") or []],
            characters=[Character.from_dict(item) for item in data.get("Characters") or []],
        )


@dataclass
class GuildMember:
    nickname: str
    url: str


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
