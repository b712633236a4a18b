"""
Offline fakes for framework unit tests.

`FakePage` answers just enough of the Playwright Page surface used by the
locator, page-object and command layers:

- a selector is "visible" when it is in `page.visible`
- interactions and navigations are recorded in `page.actions`
- clicking a selector listed in `page.routes` moves `page.url`
- `expect(...)` assertions are checked against the same state and
  recorded in `page.checks`
"""

from types import SimpleNamespace
from typing import Dict, List, Set, Tuple

import pytest

from testsuites.ui_testing.framework import page_base
from testsuites.ui_testing.framework.config_loader import ConfigLoader


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str):
        self.page = page
        self.selector = selector

    @property
    def first(self) -> "FakeLocator":
        return self

    async def wait_for(self, state: str = "visible", timeout: int = 0) -> None:
        self.page.waits.append((self.selector, timeout))
        if self.selector not in self.page.visible:
            raise TimeoutError(f"Timeout {timeout}ms exceeded waiting for {self.selector}")

    async def is_visible(self) -> bool:
        return self.selector in self.page.visible

    async def count(self) -> int:
        return 1 if self.selector in self.page.present else 0

    async def click(self) -> None:
        self.page.actions.append(("click", self.selector))
        if self.selector in self.page.routes:
            self.page.url = self.page.routes[self.selector]

    async def fill(self, value: str) -> None:
        self.page.actions.append(("fill", self.selector, value))


class FakeContext:
    def __init__(self):
        self.cookies_cleared = 0

    async def clear_cookies(self) -> None:
        self.cookies_cleared += 1


class FakePage:
    def __init__(self, url: str = "about:blank"):
        self.url = url
        self.visible: Set[str] = set()
        # Attached to the DOM but not necessarily visible
        self.present: Set[str] = set()
        self.texts: Dict[str, str] = {}
        self.routes: Dict[str, str] = {}
        self.actions: List[Tuple] = []
        self.checks: List[Tuple] = []
        self.waits: List[Tuple[str, int]] = []
        self.scripts: List[str] = []
        self.listeners = {}
        self.context = FakeContext()

    def on(self, event: str, callback) -> None:
        self.listeners.setdefault(event, []).append(callback)

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    async def goto(self, url: str, wait_until: str = "load") -> None:
        self.actions.append(("goto", url))
        self.url = url

    async def evaluate(self, script: str) -> None:
        self.scripts.append(script)


class FakeAssertions:
    """The subset of Playwright's `expect(...)` used by the page objects."""

    def __init__(self, target):
        self.target = target
        self.page = getattr(target, "page", target)

    async def to_be_visible(self, timeout: int = 0) -> None:
        self.page.checks.append(("visible", self.target.selector))
        if self.target.selector not in self.page.visible:
            raise AssertionError(f"{self.target.selector} is not visible")

    async def to_contain_text(self, pattern, timeout: int = 0) -> None:
        self.page.checks.append(("text", self.target.selector, pattern.pattern))
        text = self.page.texts.get(self.target.selector, "")
        if not pattern.search(text):
            raise AssertionError(f"{self.target.selector} text {text!r} lacks {pattern.pattern!r}")

    async def to_have_url(self, pattern, timeout: int = 0) -> None:
        self.page.checks.append(("url", pattern.pattern))
        if not pattern.search(self.page.url):
            raise AssertionError(f"URL {self.page.url!r} lacks {pattern.pattern!r}")


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def make_response():
    """Build objects shaped like a Playwright Response."""
    def build(url: str, status: int = 200, method: str = "POST") -> SimpleNamespace:
        return SimpleNamespace(url=url, status=status, request=SimpleNamespace(method=method))
    return build


@pytest.fixture(autouse=True)
def _fake_expect(monkeypatch):
    monkeypatch.setattr(page_base, "expect", FakeAssertions)


@pytest.fixture(autouse=True)
def _reset_config_loader():
    """Unit tests build their own loaders; never leak one into the UI session."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
