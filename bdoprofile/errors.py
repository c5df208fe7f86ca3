"""Error taxonomy for profile retrieval."""

from __future__ import annotations

from typing import Optional


class ProfileError(Exception):
    """Base class for every failure surfaced to the user."""


class NetworkError(ProfileError):
    """Transport failure or timeout while talking to the site."""


class HttpStatusError(ProfileError):
    """The site answered with a status other than 200."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        status = f"{status_code} {reason}".strip()
        super().__init__(f"server returned status: {status}")
        self.status_code = status_code
        self.reason = reason


class ProfileNotFoundError(ProfileError):
    """The search page listed no profile for the requested family."""

    def __init__(self, family_name: str) -> None:
        super().__init__(
            f"Could not find profile link for '{family_name}'. May not exist or profile is private"
        )
        self.family_name = family_name


class ProfileDataError(ProfileError):
    """An exported profile file could not be read."""

    def __init__(self, path: str, detail: Optional[str] = None) -> None:
        message = f"could not read profile data from {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.path = path
