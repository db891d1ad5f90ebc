"""Sidebar navigation component."""

from practicals.components.navigation.component import (
    PAGE_KEYS,
    PAGES,
    NavPage,
    NavState,
    UnknownPageError,
    navigate,
    toggle,
)

__all__ = ["toggle", "navigate", "NavPage", "NavState", "UnknownPageError", "PAGES", "PAGE_KEYS"]
