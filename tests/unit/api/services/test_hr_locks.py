"""Tests for the per-HR lock registry."""

from __future__ import annotations

import asyncio

import pytest

from api.services.hr_locks import HRLockRegistry


class TestHRLockRegistry:
    @pytest.mark.asyncio
    async def test_entry_exists_only_while_held(self):
        registry = HRLockRegistry()

        async with registry.hold("hr@acme.test"):
            assert len(registry) == 1

        assert len(registry) == 0

    @pytest.mark.asyncio
    async def test_key_is_case_and_whitespace_insensitive(self):
        registry = HRLockRegistry()
        entered = asyncio.Event()
        release = asyncio.Event()

        async def holder() -> None:
            async with registry.hold(" HR@Acme.test "):
                entered.set()
                await release.wait()

        task = asyncio.create_task(holder())
        await entered.wait()

        waiter = asyncio.create_task(_hold_once(registry, "hr@acme.test"))
        await asyncio.sleep(0)
        assert len(registry) == 1
        assert not waiter.done()

        release.set()
        await asyncio.gather(task, waiter)
        assert len(registry) == 0

    @pytest.mark.asyncio
    async def test_different_hrs_do_not_block_each_other(self):
        registry = HRLockRegistry()

        async with registry.hold("hr@acme.test"):
            async with registry.hold("hr@globex.test"):
                assert len(registry) == 2

        assert len(registry) == 0

    @pytest.mark.asyncio
    async def test_lock_serializes_critical_sections(self):
        registry = HRLockRegistry()
        events: list[str] = []

        async def critical(name: str) -> None:
            async with registry.hold("hr@acme.test"):
                events.append(f"{name}-start")
                await asyncio.sleep(0.01)
                events.append(f"{name}-end")

        await asyncio.gather(critical("a"), critical("b"))

        assert events in (
            ["a-start", "a-end", "b-start", "b-end"],
            ["b-start", "b-end", "a-start", "a-end"],
        )
        assert len(registry) == 0

    @pytest.mark.asyncio
    async def test_error_inside_block_releases_and_drops_entry(self):
        registry = HRLockRegistry()

        with pytest.raises(RuntimeError, match="boom"):
            async with registry.hold("hr@acme.test"):
                raise RuntimeError("boom")

        assert len(registry) == 0
        await asyncio.wait_for(_hold_once(registry, "hr@acme.test"), timeout=1)

    @pytest.mark.asyncio
    async def test_many_distinct_hrs_leave_nothing_behind(self):
        registry = HRLockRegistry()

        await asyncio.gather(*(_hold_once(registry, f"hr{i}@acme.test") for i in range(50)))

        assert len(registry) == 0


async def _hold_once(registry: HRLockRegistry, hr_email: str) -> None:
    async with registry.hold(hr_email):
        await asyncio.sleep(0)
