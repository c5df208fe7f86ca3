"""Interactive full-screen session: the event loop around the controller."""

from __future__ import annotations

import asyncio
import signal
import sys
from typing import Callable, Optional, Set

from rich.console import Console, RenderableType
from rich.live import Live
from rich.spinner import Spinner

from .config import settings
from .controller import (
    Command,
    Event,
    FetchFailed,
    FetchOutcome,
    FetchProfile,
    KeyPress,
    ProfileFetched,
    ProfileURLResolved,
    Quit,
    ResolveProfile,
    Resize,
    SessionController,
)
from .errors import ProfileError
from .output import export_debug_profile
from .render import Theme, render_screen
from .scraper import ProfileScraper
from .terminal import KeyDecoder, raw_mode, read_available


class ProfileViewerApp:
    """Feed keys, resizes and fetch outcomes through the session controller.

    Every event is queued on one asyncio loop. Commands returned by the
    controller run as tasks; the blocking scraper call happens in a worker
    thread and each task posts exactly one outcome back onto the queue.
    """

    def __init__(
        self,
        scraper: Optional[ProfileScraper] = None,
        controller: Optional[SessionController] = None,
        console: Optional[Console] = None,
        theme: Optional[Theme] = None,
        debug_output: Optional[str] = settings.debug_output,
    ) -> None:
        self.theme = theme or Theme()
        self.scraper = scraper or ProfileScraper()
        self.controller = controller or SessionController(theme=self.theme)
        self.console = console or Console()
        self.debug_output = debug_output
        self.queue: asyncio.Queue[Event] = asyncio.Queue()
        self.spinner = Spinner("dots", style=self.theme.spinner)
        self.key_decoder = KeyDecoder()
        self._tasks: Set[asyncio.Task] = set()

    def run(self) -> None:
        asyncio.run(self.run_async())

    async def run_async(self) -> None:
        loop = asyncio.get_running_loop()
        fd = sys.stdin.fileno()

        with raw_mode(fd), Live(
            get_renderable=self.render,
            console=self.console,
            screen=True,
            auto_refresh=True,
            refresh_per_second=12,
        ) as live:
            loop.add_reader(fd, self._on_input, fd)
            loop.add_signal_handler(signal.SIGWINCH, self._on_resize)
            self._on_resize()
            try:
                await self.process_events(live.refresh)
            finally:
                loop.remove_signal_handler(signal.SIGWINCH)
                loop.remove_reader(fd)
                await self.cancel_pending()

    def render(self) -> RenderableType:
        return render_screen(self.controller, self.theme, self.spinner)

    def post(self, event: Event) -> None:
        self.queue.put_nowait(event)

    async def process_events(self, refresh: Optional[Callable[[], None]] = None) -> None:
        while True:
            event = await self.queue.get()
            if not self.process_event(event):
                return
            if refresh is not None:
                refresh()

    def process_event(self, event: Event) -> bool:
        """Hand ``event`` to the controller; ``False`` means the session should end."""
        command = self.controller.handle(event)
        if isinstance(command, Quit):
            return False
        if command is not None:
            self.dispatch(command)
        return True

    def dispatch(self, command: Command) -> asyncio.Task:
        task = asyncio.create_task(self._run_command(command))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def cancel_pending(self) -> None:
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def execute(self, command: Command) -> FetchOutcome:
        """Run one fetch command to completion and describe its outcome."""
        try:
            if isinstance(command, ResolveProfile):
                url = await asyncio.to_thread(self.scraper.resolve_profile_url, command.family_name)
                return ProfileURLResolved(request_id=command.request_id, url=url)
            if isinstance(command, FetchProfile):
                profile = await asyncio.to_thread(self.scraper.fetch_profile, command.url)
            else:
                raise TypeError(f"unsupported command: {command!r}")
        except ProfileError as exc:
            return FetchFailed(request_id=command.request_id, message=str(exc))

        if self.debug_output:
            await asyncio.to_thread(export_debug_profile, profile, self.debug_output)
        return ProfileFetched(request_id=command.request_id, profile=profile)

    async def _run_command(self, command: Command) -> None:
        try:
            outcome = await self.execute(command)
        except Exception as exc:
            # Unexpected markup or transport errors still end the loading state.
            outcome = FetchFailed(request_id=command.request_id, message=str(exc) or type(exc).__name__)
        self.post(outcome)

    def _on_input(self, fd: int) -> None:
        for key in self.key_decoder.feed(read_available(fd)):
            self.post(KeyPress(key))

    def _on_resize(self) -> None:
        width, height = self.console.size
        self.post(Resize(width=width, height=height))
