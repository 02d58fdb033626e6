from __future__ import annotations

import pytest

from pixelstroke.core.time import RealTimeSource, SimTimeSource


@pytest.mark.asyncio
async def test_sim_sleep_advances_clock() -> None:
    ts = SimTimeSource(start=10.0)
    await ts.sleep(0.5)
    await ts.sleep(0.25)
    assert ts.monotonic() == pytest.approx(10.75)


@pytest.mark.asyncio
async def test_sim_sleep_ignores_non_positive() -> None:
    ts = SimTimeSource()
    await ts.sleep(0.0)
    await ts.sleep(-1.0)
    assert ts.monotonic() == 0.0


def test_sim_advance() -> None:
    ts = SimTimeSource()
    ts.advance(2.0)
    assert ts.monotonic() == 2.0
    with pytest.raises(ValueError):
        ts.advance(-0.1)


@pytest.mark.asyncio
async def test_real_time_is_monotonic() -> None:
    ts = RealTimeSource()
    a = ts.monotonic()
    await ts.sleep(0)
    assert ts.monotonic() >= a
