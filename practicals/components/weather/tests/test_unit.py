from practicals.components.weather import MSG_NOT_FOUND, WEATHER_DATA, lookup_weather


def test_known_city() -> None:
    r = lookup_weather("  Mumbai ")
    assert r.found
    assert r.city == "Mumbai"
    assert r.message == "Weather in Mumbai: 30°C, Clear"


def test_every_table_entry_resolves() -> None:
    for city, report in WEATHER_DATA.items():
        assert lookup_weather(city).report == report


def test_match_is_case_sensitive() -> None:
    r = lookup_weather("mumbai")
    assert not r.found
    assert r.message == MSG_NOT_FOUND


def test_empty_city() -> None:
    assert lookup_weather(None).message == MSG_NOT_FOUND
