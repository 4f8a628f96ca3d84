"""Fixtures — a resource-tracking fake browser engine."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import pytest

from src.scraper import BatchCoordinator, EngineStartupError

FIXTURE_HTML = """
<html>
  <head><title>Fixture</title><style>p { color: red; }</style></head>
  <body>
    <header><h1>Site banner</h1><a href="/home">Home</a></header>
    <nav><a href="/about">About</a></nav>
    <h1>Main   title</h1>
    <h2>
      Sub title
    </h2>
    <p>  First paragraph
       spans	lines. </p>
    <table>
      <tr><th>Name</th><th>Value</th></tr>
      <tr><td> alpha </td><td>1</td></tr>
    </table>
    <a href="/docs?page=1">Read   the docs</a>
    <script>var x = "<p>not content</p>";</script>
    <footer><p>Copyright</p></footer>
  </body>
</html>
"""


@dataclass
class EngineTracker:
    """Counts every resource the fake engine opens and closes."""

    launches: int = 0
    sessions_closed: int = 0
    contexts_opened: int = 0
    contexts_closed: int = 0
    navigations: list[str] = field(default_factory=list)
    contexts_open_at_session_close: int | None = None


class FakePage:
    def __init__(self, engine: FakeEngine) -> None:
        self._engine = engine
        self.url = "about:blank"

    async def goto(self, url: str, *, wait_until, timeout):
        self._engine.tracker.navigations.append(url)
        delay = self._engine.delays.get(url, 0)
        if delay:
            await asyncio.sleep(delay)
        failure = self._engine.failures.get(url)
        if failure is not None:
            raise failure
        self.url = url
        return None

    async def content(self) -> str:
        failure = self._engine.content_failures.get(self.url)
        if failure is not None:
            raise failure
        return self._engine.pages.get(self.url, FIXTURE_HTML)


class FakeContext:
    def __init__(self, engine: FakeEngine) -> None:
        self._engine = engine
        self.closed = False

    async def new_page(self) -> FakePage:
        return FakePage(self._engine)

    async def close(self) -> None:
        self.closed = True
        self._engine.tracker.contexts_closed += 1


class FakeSession:
    def __init__(self, engine: FakeEngine) -> None:
        self._engine = engine

    async def new_context(self) -> FakeContext:
        self._engine.tracker.contexts_opened += 1
        return FakeContext(self._engine)

    async def close(self) -> None:
        tracker = self._engine.tracker
        tracker.contexts_open_at_session_close = tracker.contexts_opened - tracker.contexts_closed
        tracker.sessions_closed += 1


class FakeEngine:
    """A launcher whose sessions serve canned HTML and scripted failures."""

    def __init__(self, fail_startup: bool = False) -> None:
        self.tracker = EngineTracker()
        self.fail_startup = fail_startup
        self.pages: dict[str, str] = {}
        self.failures: dict[str, Exception] = {}
        self.content_failures: dict[str, Exception] = {}
        self.delays: dict[str, float] = {}

    async def acquire(self) -> FakeSession:
        self.tracker.launches += 1
        if self.fail_startup:
            raise EngineStartupError("browser executable not found")
        return FakeSession(self)


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def coordinator(engine: FakeEngine) -> BatchCoordinator:
    return BatchCoordinator(engine, navigation_timeout=5)


@pytest.fixture
def fixture_html() -> str:
    return FIXTURE_HTML


@pytest.fixture
def failing_engine() -> FakeEngine:
    return FakeEngine(fail_startup=True)
