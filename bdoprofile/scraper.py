"""Site operations: chain the fetcher and the extractor per page kind."""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup

from .config import settings
from .extractor import (
    build_guild_url,
    build_search_url,
    extract_guild_members,
    extract_profile,
    resolve_profile_url,
)
from .fetcher import Fetcher
from .models import GuildMember, Profile


class ProfileScraper:
    """Look up families and guilds on the adventurer site using a fetcher."""

    def __init__(self, fetcher: Optional[Fetcher] = None, base_url: Optional[str] = None) -> None:
        self.fetcher = fetcher or Fetcher()
        self.base_url = base_url or settings.base_url

    def resolve_profile_url(self, family_name: str) -> str:
        search_url = build_search_url(self.base_url, family_name)
        return resolve_profile_url(self._document(search_url), family_name, self.base_url)

    def fetch_profile(self, profile_url: str) -> Profile:
        return extract_profile(self._document(profile_url))

    def find_profile(self, family_name: str) -> Profile:
        """Resolve ``family_name`` and fetch its profile, one request after the other."""
        return self.fetch_profile(self.resolve_profile_url(family_name))

    def fetch_guild_members(self, guild_name: str) -> List[GuildMember]:
        guild_url = build_guild_url(self.base_url, guild_name, settings.region)
        return extract_guild_members(self._document(guild_url), self.base_url)

    def _document(self, url: str) -> BeautifulSoup:
        return self.fetcher.fetch_document(url)
