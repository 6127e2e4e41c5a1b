# tests/test_notifications.py
from __future__ import annotations

import sys
import asyncio
from pathlib import Path

# Make the `ansyla` directory importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from ansyla.notifications import Alert, AlertCenter

@pytest.mark.asyncio
async def test_schedule_shows_alert_until_expiry() -> None:
    center = AlertCenter()
    center.schedule("Application failed to send. Please try again.", duration=0.01)
    assert [a.message for a in center.active] == ["Application failed to send. Please try again."]

    await asyncio.sleep(0.05)
    assert center.active == [], "Alert should expire on its own"

@pytest.mark.asyncio
async def test_dismiss_removes_alert_early() -> None:
    center = AlertCenter()
    first = center.schedule("first", duration=10)
    center.schedule("second", duration=10)

    assert center.dismiss(first)
    assert [a.message for a in center.active] == ["second"]
    assert not center.dismiss(first), "Dismissing twice is a no-op"

@pytest.mark.asyncio
async def test_default_duration_applies() -> None:
    center = AlertCenter(default_duration=0.01)
    handle = center.schedule("boom")
    assert center.active[0].duration == 0.01
    await asyncio.sleep(0.05)
    assert not center.dismiss(handle), "Expired alerts cannot be dismissed"

@pytest.mark.asyncio
async def test_zero_duration_stays_until_dismissed() -> None:
    center = AlertCenter()
    handle = center.schedule("sticky", duration=0)
    await asyncio.sleep(0.02)
    assert len(center.active) == 1
    center.dismiss(handle)
    assert center.active == []

@pytest.mark.asyncio
async def test_listeners_get_snapshots() -> None:
    center = AlertCenter()
    snapshots: list[list[Alert]] = []
    center.subscribe(snapshots.append)

    handle = center.schedule("one", duration=0.01)
    center.schedule("two", duration=10)
    center.dismiss(handle)

    assert [[a.message for a in snap] for snap in snapshots] == [["one"], ["one", "two"], ["two"]]

@pytest.mark.asyncio
async def test_handles_are_unique() -> None:
    center = AlertCenter()
    handles = {center.schedule(f"alert {i}", duration=10) for i in range(5)}
    assert len(handles) == 5
