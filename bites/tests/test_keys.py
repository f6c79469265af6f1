from bites.store import keys
from bites.store.config import DEFAULT_STORE_CONFIG

PREFIX = DEFAULT_STORE_CONFIG.key_prefix


def test_get_key_name_joins_under_prefix():
    assert keys.get_key_name("a", "b") == f"{PREFIX}:a:b"


def test_entity_keys():
    assert keys.restaurant_key("42") == f"{PREFIX}:restaurant:42"
    assert keys.reviews_key("42") == f"{PREFIX}:reviews:42"
    assert keys.review_details_key("r9") == f"{PREFIX}:review_details:r9"
    assert keys.cuisine_key("thai") == f"{PREFIX}:cuisine:thai"
    assert keys.weather_key("42") == f"{PREFIX}:weather:42"
    assert keys.index_key() == f"{PREFIX}:idx:restaurants"
    assert keys.bloom_key() == f"{PREFIX}:bloom_restaurants"


def test_restaurant_prefix_only_matches_restaurant_hashes():
    prefix = keys.restaurant_key("")
    others = [
        keys.reviews_key("1"),
        keys.review_details_key("1"),
        keys.cuisines_key(),
        keys.cuisine_key("thai"),
        keys.restaurant_cuisines_key("1"),
        keys.restaurants_by_rating_key(),
        keys.weather_key("1"),
        keys.restaurant_details_key("1"),
        keys.index_key(),
        keys.bloom_key(),
    ]
    assert not any(k.startswith(prefix) for k in others)


def test_id_from_key():
    assert keys.id_from_key(keys.restaurant_key("abc_-1")) == "abc_-1"
