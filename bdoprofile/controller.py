"""Session state machine for the interactive profile viewer.

The controller never performs I/O. ``handle`` consumes one event (a key, a
resize or the outcome of a fetch) and returns the next command for the event
loop to run, if any. Fetch commands carry a request id; an outcome is applied
only while the controller is still loading that same request, so late answers
from an abandoned search are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .config import settings
from .models import Profile
from .render import Theme, render_profile
from .widgets import TextInput, Viewport


class State(str, Enum):
    SEARCH = "search"
    LOADING = "loading"
    PROFILE_VIEW = "profile_view"
    ERROR = "error"


# --------------------------------------------------------------------------- #
# Events
# --------------------------------------------------------------------------- #
@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class ProfileURLResolved:
    request_id: int
    url: str


@dataclass(frozen=True)
class ProfileFetched:
    request_id: int
    profile: Profile


@dataclass(frozen=True)
class FetchFailed:
    request_id: int
    message: str


FetchOutcome = Union[ProfileURLResolved, ProfileFetched, FetchFailed]
Event = Union[KeyPress, Resize, ProfileURLResolved, ProfileFetched, FetchFailed]


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #
@dataclass(frozen=True)
class ResolveProfile:
    request_id: int
    family_name: str


@dataclass(frozen=True)
class FetchProfile:
    request_id: int
    url: str


@dataclass(frozen=True)
class Quit:
    pass


Command = Union[ResolveProfile, FetchProfile, Quit]

SUBMIT_KEYS = {"enter"}
QUIT_KEYS = {"ctrl+c"}
SEARCH_QUIT_KEYS = {"esc", "ctrl+c"}
BACK_KEYS = {"backspace", "esc"}

# Title, blank line, help line and the outer margin around the viewport.
VIEWPORT_CHROME_LINES = 6
VIEWPORT_CHROME_COLUMNS = 4


class SessionController:
    """Finite-state machine for search, loading, profile display and errors."""

    def __init__(self, theme: Optional[Theme] = None) -> None:
        self.theme = theme or Theme()
        self.state = State.SEARCH
        self.text_input = TextInput(placeholder="Family Name", char_limit=settings.input_char_limit)
        self.viewport = Viewport(settings.viewport_width, settings.viewport_height)
        self.profile: Optional[Profile] = None
        self.error_message = ""
        self.request_id = 0
        self.searched_name = ""

    def handle(self, event: Event) -> Optional[Command]:
        if isinstance(event, KeyPress):
            return self._handle_key(event.key)
        if isinstance(event, Resize):
            self.viewport.resize(event.width - VIEWPORT_CHROME_COLUMNS, event.height - VIEWPORT_CHROME_LINES)
            return None
        if isinstance(event, (ProfileURLResolved, ProfileFetched, FetchFailed)):
            return self._handle_outcome(event)
        raise TypeError(f"unsupported event: {event!r}")

    # ------------------------------------------------------------------ #
    # Keys
    # ------------------------------------------------------------------ #
    def _handle_key(self, key: str) -> Optional[Command]:
        if self.state in (State.SEARCH, State.ERROR):
            if key in SUBMIT_KEYS:
                return self._submit()
            if key in SEARCH_QUIT_KEYS:
                return Quit()
            self.text_input.handle_key(key)
            return None

        if self.state == State.PROFILE_VIEW:
            if key in QUIT_KEYS:
                return Quit()
            if key in BACK_KEYS:
                self._back_to_search()
                return None
            self.viewport.handle_key(key)
            return None

        # Loading: only an explicit quit gets through.
        if key in QUIT_KEYS:
            return Quit()
        return None

    def _submit(self) -> Optional[Command]:
        family_name = self.text_input.value.strip()
        if not family_name:
            return None
        self.request_id += 1
        self.searched_name = family_name
        self.error_message = ""
        self.state = State.LOADING
        return ResolveProfile(request_id=self.request_id, family_name=family_name)

    def _back_to_search(self) -> None:
        self.profile = None
        self.viewport.clear()
        self.text_input.reset()
        self.state = State.SEARCH

    # ------------------------------------------------------------------ #
    # Fetch outcomes
    # ------------------------------------------------------------------ #
    def _handle_outcome(self, outcome: FetchOutcome) -> Optional[Command]:
        if not self.is_current(outcome):
            return None

        if isinstance(outcome, ProfileURLResolved):
            return FetchProfile(request_id=outcome.request_id, url=outcome.url)

        if isinstance(outcome, ProfileFetched):
            self.profile = outcome.profile
            self.viewport.set_content(render_profile(outcome.profile, self.theme))
            self.viewport.goto_top()
            self.state = State.PROFILE_VIEW
            return None

        self.error_message = outcome.message
        self.state = State.ERROR
        return None

    def is_current(self, outcome: FetchOutcome) -> bool:
        """Whether ``outcome`` answers the request the controller is waiting on."""
        return self.state == State.LOADING and outcome.request_id == self.request_id
