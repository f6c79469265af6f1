"""
Redis Stack access layer.

Responsibilities:
- Build namespaced keys for every entity type.
- Hand out a shared Redis client to request handlers.
- Create the search index and Bloom filter the API relies on.
"""
