import pytest

from practicals.adapters.memory.stores import InMemoryRepStore
from practicals.components.reps import apply_action, run_update


@pytest.mark.parametrize(
    ("current", "action", "count", "expected"),
    [
        (3, "increment", None, 4),
        (3, "decrement", None, 2),
        (0, "decrement", None, 0),
        (9, "reset", None, 0),
        (2, "set", 15, 15),
        (2, "set", -4, 0),
        (2, "set", "15", 2),
        (2, "set", True, 2),
        (2, "jump", None, 2),
        (2, None, None, 2),
    ],
)
def test_apply_action(current: int, action: str | None, count: object, expected: int) -> None:
    assert apply_action(current, action, count) == expected


def test_run_update_persists() -> None:
    store = InMemoryRepStore()
    assert run_update("squats", "increment", None, store) == 1
    assert run_update("squats", "increment", None, store) == 2
    assert store.all() == {"squats": 2}


def test_unknown_action_records_zero_for_new_exercise() -> None:
    store = InMemoryRepStore()
    assert run_update("lunges", "noop", None, store) == 0
    assert store.all() == {"lunges": 0}
