"""
Sidebar navigation component.

The sidebar is either open or closed and one page is current. Choosing a
page closes the sidebar.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class NavPage:
    key: str
    label: str
    icon: str


PAGES: tuple[NavPage, ...] = (
    NavPage("home", "Home", "🏠"),
    NavPage("about", "About", "ℹ️"),
    NavPage("contact", "Contact", "📧"),
    NavPage("services", "Services", "🔧"),
    NavPage("portfolio", "Portfolio", "💼"),
)

PAGE_KEYS = frozenset(p.key for p in PAGES)


@dataclass(frozen=True)
class NavState:
    is_open: bool = False
    current: str = "home"


class UnknownPageError(KeyError):
    pass


def toggle(state: NavState) -> NavState:
    return replace(state, is_open=not state.is_open)


def navigate(state: NavState, page: str) -> NavState:
    if page not in PAGE_KEYS:
        raise UnknownPageError(page)
    return NavState(is_open=False, current=page)
