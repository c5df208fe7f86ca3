"""bdoprofile package exports."""

from .models import FamilyInfo, LifeSkill, Character, Profile, GuildMember
from .errors import (
    ProfileError,
    NetworkError,
    HttpStatusError,
    ProfileNotFoundError,
    ProfileDataError,
)
from .fetcher import Fetcher, FetchResult
from .extractor import extract_profile, resolve_profile_url, split_level
from .scraper import ProfileScraper
from .controller import SessionController, State
from .render import Theme, render_profile
from .gearscore import GearscoreSummary, parse_papd, summarize
from .output import JsonWriter, CsvWriter, read_profile_json, read_roster_csv

__all__ = [
    "FamilyInfo",
    "LifeSkill",
    "Character",
    "Profile",
    "GuildMember",
    "ProfileError",
    "NetworkError",
    "HttpStatusError",
    "ProfileNotFoundError",
    "ProfileDataError",
    "Fetcher",
    "FetchResult",
    "extract_profile",
    "resolve_profile_url",
    "split_level",
    "ProfileScraper",
    "SessionController",
    "State",
    "Theme",
    "render_profile",
    "GearscoreSummary",
    "parse_papd",
    "summarize",
    "JsonWriter",
    "CsvWriter",
    "read_profile_json",
    "read_roster_csv",
]
