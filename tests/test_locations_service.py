"""
Unit tests for location service logic.
"""

from unittest.mock import AsyncMock, patch

import pytest

from locations import service


@pytest.mark.asyncio
async def test_grid_status_asks_for_every_grid_name():
    counter = AsyncMock()
    counter.get_counts.return_value = []

    await service.grid_status(counter)

    names = counter.get_counts.await_args.args[0]
    assert len(names) == 416
    assert names[:2] == ["A0", "A1"]


@pytest.mark.asyncio
async def test_find_location_is_exact_match_and_shapes_row():
    row = {"location": "C7", "park_id": 3, "maintenance_performed": None}
    with patch("locations.repository.find_location", new_callable=AsyncMock, return_value=row) as find_mock:
        result = await service.find_location(" C7 ", 3)

    find_mock.assert_awaited_once_with(" C7 ", 3)
    assert result == {"location": "C7", "park_id": 3, "maintenance_performed": None}


@pytest.mark.asyncio
async def test_find_location_missing():
    with patch("locations.repository.find_location", new_callable=AsyncMock, return_value=None):
        assert await service.find_location("Z99", 1) is None


@pytest.mark.asyncio
async def test_locations_needing_maintenance_passes_threshold():
    with patch(
        "locations.repository.list_locations_needing_maintenance",
        new_callable=AsyncMock,
        return_value=[],
    ) as list_mock:
        assert await service.locations_needing_maintenance() == []

    list_mock.assert_awaited_once_with(720)
