"""Gym rep counter component."""

from practicals.components.reps.component import RepStorePort, apply_action, run_update

__all__ = ["apply_action", "run_update", "RepStorePort"]
