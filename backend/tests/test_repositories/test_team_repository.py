"""Tests for TeamRepository using mocked MongoDB."""

import asyncio

from teamscope.repositories.teams import TeamRepository
from tests.mocks.mongodb import create_mock_collection, create_mock_db


def _repo(collection):
    return TeamRepository(create_mock_db({"teams": collection}))


class TestGetById:
    def test_returns_none_when_missing(self):
        collection = create_mock_collection(find_one=None)
        assert asyncio.run(_repo(collection).get_by_id("nope")) is None

    def test_returns_team(self):
        collection = create_mock_collection(find_one={"_id": "t1", "name": "qa team"})
        team = asyncio.run(_repo(collection).get_by_id("t1"))
        assert team.name == "qa team"
        assert team.hidden is False


class TestGetHidden:
    def test_queries_hidden_flag(self):
        collection = create_mock_collection(find_one=None)

        asyncio.run(_repo(collection).get_hidden())

        collection.find_one.assert_called_once_with({"hidden": True})
