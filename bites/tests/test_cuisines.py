from __future__ import annotations

from bites.store import keys


def test_list_cuisines_sorted(client, store):
    store.smembers.return_value = {"thai", "indian", "cafe"}
    resp = client.get("/cuisines")
    assert resp.status_code == 200
    assert resp.json()["data"] == ["cafe", "indian", "thai"]
    store.smembers.assert_called_once_with(keys.cuisines_key())


def test_restaurants_for_cuisine(client, store, pipe):
    store.smembers.return_value = {"r2", "r1"}
    pipe.execute.return_value = ["Truffles", None]

    resp = client.get("/cuisines/Cafe")

    assert resp.json()["data"] == ["Truffles"]
    store.smembers.assert_called_once_with(keys.cuisine_key("cafe"))
    pipe.hget.assert_any_call(keys.restaurant_key("r1"), "name")


def test_restaurants_for_unknown_cuisine(client, store):
    store.smembers.return_value = set()
    resp = client.get("/cuisines/klingon")
    assert resp.json()["data"] == []
    store.pipeline.assert_not_called()
