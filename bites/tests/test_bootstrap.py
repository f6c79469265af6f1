from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from redis.exceptions import ResponseError

from bites.store import keys
from bites.store.bootstrap import bootstrap_store, create_bloom_filter, create_search_index
from bites.store.config import StoreConfig


def test_search_index_left_alone_when_present():
    client = MagicMock()
    client.ft.return_value.info.return_value = {"index_name": keys.index_key()}

    assert create_search_index(client) is False
    client.ft.return_value.create_index.assert_not_called()


def test_search_index_created_when_missing():
    client = MagicMock()
    client.ft.return_value.info.side_effect = ResponseError("Unknown index name")

    assert create_search_index(client) is True

    client.ft.assert_called_with(keys.index_key())
    args, kwargs = client.ft.return_value.create_index.call_args
    assert [f.name for f in args[0]] == ["name", "location", "avg_stars"]
    assert "definition" in kwargs


def test_bloom_filter_reserved():
    client = MagicMock()
    config = StoreConfig(bloom_error_rate=0.01, bloom_capacity=1000)

    assert create_bloom_filter(client, config) is True
    client.bf.return_value.reserve.assert_called_once_with(keys.bloom_key(), 0.01, 1000)


def test_bloom_filter_already_exists():
    client = MagicMock()
    client.bf.return_value.reserve.side_effect = ResponseError("item exists")
    assert create_bloom_filter(client) is False


def test_bloom_filter_other_errors_propagate():
    client = MagicMock()
    client.bf.return_value.reserve.side_effect = ResponseError("unknown command 'BF.RESERVE'")
    with pytest.raises(ResponseError):
        create_bloom_filter(client)


def test_bootstrap_store_reports_both():
    client = MagicMock()
    client.ft.return_value.info.side_effect = ResponseError("Unknown index name")
    assert bootstrap_store(client) == {
        "search_index_created": True,
        "bloom_filter_created": True,
    }
