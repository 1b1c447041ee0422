import asyncio

import pytest

from flightlog.shared.utils.background import drain_pending, fire_and_forget, pending_count


@pytest.mark.asyncio
async def test_fire_and_forget_is_tracked_until_done():
    gate = asyncio.Event()

    async def _send():
        await gate.wait()
        return True

    fire_and_forget(_send(), label="prueba")
    assert pending_count() == 1

    gate.set()
    assert await drain_pending() == 1
    assert pending_count() == 0


@pytest.mark.asyncio
async def test_failures_are_swallowed():
    async def _boom():
        raise RuntimeError("fallo")

    task = fire_and_forget(_boom(), label="prueba")
    await drain_pending()

    assert task.done()
    assert pending_count() == 0


@pytest.mark.asyncio
async def test_drain_with_nothing_pending():
    assert await drain_pending() == 0
