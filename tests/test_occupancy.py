"""
Unit tests for the carnivore location counter.
"""

from unittest.mock import AsyncMock, MagicMock, call

import pytest
from redis.exceptions import ResponseError

from locations.occupancy import CarnivoreLocationCounter, get_grid_location_names


class TestGridLocationNames:
    def test_returns_416_locations(self):
        locations = get_grid_location_names()

        assert len(locations) == 26 * 16
        assert locations[0] == "A0"
        assert locations[15] == "A15"
        assert locations[16] == "B0"
        assert locations[-1] == "Z15"

    def test_no_duplicates(self):
        locations = get_grid_location_names()

        assert len(set(locations)) == len(locations)
        assert "M8" in locations


class TestCarnivoreLocationCounter:
    @pytest.fixture
    def pipeline(self):
        pipe = MagicMock()
        pipe.execute = AsyncMock(return_value=[])
        return pipe

    @pytest.fixture
    def redis_client(self, pipeline):
        client = MagicMock()
        client.pipeline.return_value = pipeline
        return client

    @pytest.fixture
    def counter(self, redis_client):
        return CarnivoreLocationCounter(redis_client)

    @pytest.mark.asyncio
    async def test_empty_input_makes_no_redis_calls(self, counter, redis_client):
        result = await counter.get_counts([])

        assert result == []
        redis_client.pipeline.assert_not_called()
        assert redis_client.method_calls == []

    @pytest.mark.asyncio
    async def test_one_pipeline_with_prefixed_keys(self, counter, redis_client, pipeline):
        pipeline.execute.return_value = [2, 0]

        result = await counter.get_counts(["A5", "B10"])

        redis_client.pipeline.assert_called_once_with(transaction=False)
        assert pipeline.hlen.call_args_list == [call("carnivore:A5"), call("carnivore:B10")]
        pipeline.execute.assert_awaited_once_with(raise_on_error=False)
        assert result == [
            {"location": "A5", "hungryCarnivoreCount": 2},
            {"location": "B10", "hungryCarnivoreCount": 0},
        ]

    @pytest.mark.asyncio
    async def test_duplicates_each_get_a_result(self, counter, pipeline):
        pipeline.execute.return_value = [3, 3]

        result = await counter.get_counts(["A0", "A0"])

        assert pipeline.hlen.call_count == 2
        assert result == [
            {"location": "A0", "hungryCarnivoreCount": 3},
            {"location": "A0", "hungryCarnivoreCount": 3},
        ]

    @pytest.mark.asyncio
    async def test_error_item_counts_as_zero(self, counter, pipeline):
        pipeline.execute.return_value = [2, ResponseError("WRONGTYPE"), 1]

        result = await counter.get_counts(["X", "Y", "Z"])

        assert result == [
            {"location": "X", "hungryCarnivoreCount": 2},
            {"location": "Y", "hungryCarnivoreCount": 0},
            {"location": "Z", "hungryCarnivoreCount": 1},
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_value", ["bad", None, True, -1, 2.5])
    async def test_malformed_count_is_zero(self, counter, pipeline, bad_value):
        pipeline.execute.return_value = [bad_value, 5]

        result = await counter.get_counts(["A", "B"])

        assert result[0]["hungryCarnivoreCount"] == 0
        assert result[1]["hungryCarnivoreCount"] == 5

    @pytest.mark.asyncio
    async def test_absent_pipeline_result_gives_empty_list(self, counter, pipeline):
        pipeline.execute.return_value = None

        assert await counter.get_counts(["A1", "A2"]) == []
