import pytest

from practicals.components.navigation import PAGES, NavState, UnknownPageError, navigate, toggle


def test_starts_closed_on_home() -> None:
    state = NavState()
    assert not state.is_open
    assert state.current == "home"


def test_toggle() -> None:
    assert toggle(NavState()).is_open
    assert not toggle(toggle(NavState())).is_open


def test_navigate_closes_sidebar() -> None:
    state = navigate(NavState(is_open=True), "portfolio")
    assert state == NavState(is_open=False, current="portfolio")


def test_unknown_page() -> None:
    with pytest.raises(UnknownPageError):
        navigate(NavState(), "blog")


def test_page_order() -> None:
    assert [p.key for p in PAGES] == ["home", "about", "contact", "services", "portfolio"]
