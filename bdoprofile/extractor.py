"""Field extraction from search, profile and guild pages."""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlencode, urljoin

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment

from . import markup
from .errors import ProfileNotFoundError
from .models import Character, FamilyInfo, GuildMember, LifeSkill, Profile

_WHITESPACE_RE = re.compile(r"\s+")


# --------------------------------------------------------------------------- #
# URLs
# --------------------------------------------------------------------------- #
def build_search_url(base_url: str, family_name: str) -> str:
    query = urlencode(
        {
            "checkSearchText": "True",
            "searchType": "2",
            "searchKeyword": family_name,
        }
    )
    return f"{base_url.rstrip('/')}{markup.SEARCH_PATH}?{query}"


def build_guild_url(base_url: str, guild_name: str, region: str = "SA") -> str:
    query = urlencode({"guildName": guild_name, "region": region})
    return f"{base_url.rstrip('/')}{markup.GUILD_PATH}?{query}"


# --------------------------------------------------------------------------- #
# Resolve step
# --------------------------------------------------------------------------- #
def resolve_profile_url(search_doc: BeautifulSoup, family_name: str, base_url: str) -> str:
    """Return the absolute profile URL of the first search result.

    Raises ``ProfileNotFoundError`` when the results list has no link, which
    the site does both for unknown and for private families.
    """
    link = search_doc.select_one(markup.SEARCH_RESULT_LINK)
    href = (link.get("href") or "").strip() if link else ""
    if not href:
        raise ProfileNotFoundError(family_name)
    return urljoin(base_url, href)


# --------------------------------------------------------------------------- #
# Profile page
# --------------------------------------------------------------------------- #
def extract_profile(profile_doc: BeautifulSoup) -> Profile:
    """Build a best-effort ``Profile``; missing elements become empty strings."""
    return Profile(
        family_info=extract_family_info(profile_doc),
        life_skills=[_extract_life_skill(item) for item in profile_doc.select(markup.LIFE_SKILL_ITEMS)],
        characters=[_extract_character(item) for item in profile_doc.select(markup.CHARACTER_ITEMS)],
    )


def extract_family_info(profile_doc: BeautifulSoup) -> FamilyInfo:
    box = profile_doc.select_one(markup.FAMILY_BOX)
    if box is None:
        return FamilyInfo()

    labelled = _labelled_rows(box)
    values: Dict[str, str] = {}
    for field_name, selector in markup.FAMILY_POSITIONAL.items():
        if field_name in labelled:
            values[field_name] = labelled[field_name]
        else:
            values[field_name] = _select_text(box, selector)

    return FamilyInfo(name=_select_text(box, markup.FAMILY_NAME), **values)


def _labelled_rows(box: Tag) -> Dict[str, str]:
    """Map family fields to row values by matching each row's label text."""
    found: Dict[str, str] = {}
    for row in box.select(markup.FAMILY_ROWS):
        label = row.select_one(markup.FAMILY_ROW_LABEL)
        if label is None:
            continue
        field_name = _match_label(label.get_text())
        if field_name is None or field_name in found:
            continue
        found[field_name] = _text_without(row, label)
    return found


def _match_label(text: str) -> Optional[str]:
    normalized = clean_text(text).lower()
    if not normalized:
        return None
    candidates = sorted(
        ((label, field_name) for field_name, labels in markup.FAMILY_LABELS.items() for label in labels),
        key=lambda pair: len(pair[0]),
        reverse=True,
    )
    for label, field_name in candidates:
        if label in normalized:
            return field_name
    return None


def _text_without(row: Tag, excluded: Tag) -> str:
    parts: List[str] = []
    for node in row.descendants:
        if not isinstance(node, NavigableString) or isinstance(node, Comment):
            continue
        if any(parent is excluded for parent in node.parents):
            continue
        parts.append(str(node))
    return clean_text(" ".join(parts))


def _extract_life_skill(item: Tag) -> LifeSkill:
    level_name, level_value = split_level(_select_text(item, markup.LIFE_SKILL_LEVEL))
    return LifeSkill(
        name=_select_text(item, markup.LIFE_SKILL_NAME),
        level_name=level_name,
        level_value=level_value,
        mastery=_select_text(item, markup.LIFE_SKILL_MASTERY),
    )


def _extract_character(item: Tag) -> Character:
    is_main = markup.MAIN_CHARACTER_TEXT in _select_text(item, markup.CHARACTER_MAIN_LABEL)
    name_tag = item.select_one(markup.CHARACTER_NAME)
    level = _select_text(item, markup.CHARACTER_LEVEL)
    if is_main:
        level = f"{level} {markup.MAIN_CHARACTER_TEXT}".strip()
    return Character(
        name=direct_text(name_tag) if name_tag is not None else "",
        character_class=_select_text(item, markup.CHARACTER_CLASS),
        level=level,
        is_main=is_main,
    )


# --------------------------------------------------------------------------- #
# Guild page
# --------------------------------------------------------------------------- #
def extract_guild_members(guild_doc: BeautifulSoup, base_url: str) -> List[GuildMember]:
    """Collect unique member links from a guild page in page order."""
    members: List[GuildMember] = []
    seen: set[str] = set()
    for link in guild_doc.select(markup.GUILD_MEMBER_LINK):
        nickname = clean_text(link.get_text())
        href = (link.get("href") or "").strip()
        if not nickname or not href or nickname in seen:
            continue
        seen.add(nickname)
        members.append(GuildMember(nickname=nickname, url=urljoin(base_url, href)))
    return members


# --------------------------------------------------------------------------- #
# Text cleanup
# --------------------------------------------------------------------------- #
def split_level(raw: str, marker: str = markup.LEVEL_MARKER) -> Tuple[str, str]:
    """Split a life-skill level such as ``"ArtesãoNv.5"`` into ``("Artesão", "5")``.

    A space is inserted before the first marker when the page glued it to the
    level name (or when there is no name at all), then the text is split on
    its first space. The marker is dropped from the value; a missing name or
    value comes back as ``""``.
    """
    text = raw.strip()
    index = text.find(marker)
    if index == 0 or (index > 0 and not text[index - 1].isspace()):
        text = f"{text[:index]} {text[index:]}"

    tokens = text.split(" ", 1)
    level_name = tokens[0].strip()
    level_value = tokens[1].strip() if len(tokens) > 1 else ""
    if level_value.startswith(marker):
        level_value = level_value[len(marker):].strip()
    return level_name, level_value


def direct_text(tag: Tag) -> str:
    """Text of ``tag``'s own string children, ignoring nested elements."""
    parts = [
        str(child)
        for child in tag.children
        if isinstance(child, NavigableString) and not isinstance(child, Comment)
    ]
    return clean_text("".join(parts))


def clean_text(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _select_text(root: Tag, selector: str) -> str:
    node = root.select_one(selector)
    return clean_text(node.get_text()) if node is not None else ""
