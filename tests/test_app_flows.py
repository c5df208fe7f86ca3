"""Tests for the asyncio session loop with a stub scraper."""

from __future__ import annotations

import asyncio
import io
import json

from rich.console import Console

from bdoprofile import NetworkError, ProfileNotFoundError, State
from bdoprofile.app import ProfileViewerApp
from bdoprofile.controller import (
    FetchFailed,
    FetchProfile,
    KeyPress,
    ProfileFetched,
    ProfileURLResolved,
    ResolveProfile,
)
from bdoprofile.models import FamilyInfo, Profile


class StubScraper:
    def __init__(self, urls=None, profiles=None) -> None:
        self.urls = urls or {}
        self.profiles = profiles or {}
        self.calls = []

    def resolve_profile_url(self, family_name: str) -> str:
        self.calls.append(("resolve", family_name))
        if family_name not in self.urls:
            raise ProfileNotFoundError(family_name)
        return self.urls[family_name]

    def fetch_profile(self, url: str) -> Profile:
        self.calls.append(("fetch", url))
        if url not in self.profiles:
            raise NetworkError(f"request to {url} failed: timed out")
        return self.profiles[url]


def _app(scraper: StubScraper, debug_output=None) -> ProfileViewerApp:
    console = Console(file=io.StringIO(), width=80, height=24)
    return ProfileViewerApp(scraper=scraper, console=console, debug_output=debug_output)


async def _next_outcome(app: ProfileViewerApp):
    return await asyncio.wait_for(app.queue.get(), timeout=5)


def _submit(app: ProfileViewerApp, text: str) -> None:
    for char in text:
        assert app.process_event(KeyPress(char))
    assert app.process_event(KeyPress("enter"))


def test_missing_family_ends_in_error_and_resubmit_dispatches_again():
    scraper = StubScraper()
    app = _app(scraper)

    async def scenario():
        _submit(app, "Foo")
        outcome = await _next_outcome(app)
        assert isinstance(outcome, FetchFailed)
        app.process_event(outcome)
        assert app.controller.state == State.ERROR
        assert "Foo" in app.controller.error_message

        assert app.process_event(KeyPress("enter"))
        assert app.controller.state == State.LOADING
        retry = await _next_outcome(app)
        assert isinstance(retry, FetchFailed)
        assert retry.request_id == 2

    asyncio.run(scenario())
    assert scraper.calls == [("resolve", "Foo"), ("resolve", "Foo")]


def test_resolve_then_fetch_shows_profile_and_writes_debug_file(tmp_path):
    profile = Profile(family_info=FamilyInfo(name="Foo", papd="Privado"))
    scraper = StubScraper(urls={"Foo": "https://site/p/foo"}, profiles={"https://site/p/foo": profile})
    debug_path = tmp_path / "debug_output.json"
    app = _app(scraper, debug_output=str(debug_path))

    async def scenario():
        _submit(app, "Foo")
        resolved = await _next_outcome(app)
        assert resolved == ProfileURLResolved(request_id=1, url="https://site/p/foo")
        app.process_event(resolved)
        assert app.controller.state == State.LOADING

        fetched = await _next_outcome(app)
        assert isinstance(fetched, ProfileFetched)
        app.process_event(fetched)

    asyncio.run(scenario())
    assert app.controller.state == State.PROFILE_VIEW
    assert app.controller.profile == profile
    assert scraper.calls == [("resolve", "Foo"), ("fetch", "https://site/p/foo")]
    assert json.loads(debug_path.read_text(encoding="utf-8"))["FamilyInfo"]["PAPD"] == "Privado"


def test_profile_fetch_failure_keeps_cause_text():
    scraper = StubScraper(urls={"Foo": "https://site/p/foo"})
    app = _app(scraper)

    async def scenario():
        return await app.execute(FetchProfile(request_id=7, url="https://site/p/foo"))

    outcome = asyncio.run(scenario())
    assert outcome == FetchFailed(request_id=7, message="request to https://site/p/foo failed: timed out")


def test_unexpected_scraper_error_still_leaves_loading():
    class BrokenScraper(StubScraper):
        def resolve_profile_url(self, family_name: str) -> str:
            raise ValueError("unexpected markup")

    app = _app(BrokenScraper())

    async def scenario():
        _submit(app, "Foo")
        outcome = await _next_outcome(app)
        assert outcome == FetchFailed(request_id=1, message="unexpected markup")
        app.process_event(outcome)

    asyncio.run(scenario())
    assert app.controller.state == State.ERROR
    assert app.controller.error_message == "unexpected markup"

def test_debug_write_failure_does_not_fail_the_fetch(tmp_path):
    profile = Profile(family_info=FamilyInfo(name="Foo"))
    scraper = StubScraper(profiles={"https://site/p": profile})
    # A directory path cannot be opened for writing.
    app = _app(scraper, debug_output=str(tmp_path))

    async def scenario():
        return await app.execute(FetchProfile(request_id=1, url="https://site/p"))

    outcome = asyncio.run(scenario())
    assert outcome == ProfileFetched(request_id=1, profile=profile)


def test_process_events_stops_on_quit():
    app = _app(StubScraper())
    refreshes = []

    async def scenario():
        app.post(KeyPress("F"))
        app.post(KeyPress("esc"))
        app.post(KeyPress("x"))
        await asyncio.wait_for(app.process_events(lambda: refreshes.append(app.controller.state)), timeout=5)

    asyncio.run(scenario())
    assert refreshes == [State.SEARCH]
    assert app.controller.text_input.value == "F"


def test_cancel_pending_stops_in_flight_commands():
    app = _app(StubScraper())

    async def scenario():
        async def never_finishes(command):
            await asyncio.sleep(3600)

        app.execute = never_finishes  # type: ignore[assignment]
        task = app.dispatch(ResolveProfile(request_id=1, family_name="Foo"))
        await asyncio.sleep(0)
        await app.cancel_pending()
        return task

    task = asyncio.run(scenario())
    assert task.cancelled()
    assert app.queue.empty()


def test_render_shows_state_specific_screen():
    app = _app(StubScraper())
    console = Console(file=io.StringIO(), width=80, color_system=None)

    console.print(app.render())
    assert "Enter a family name to search:" in console.file.getvalue()
