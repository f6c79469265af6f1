"""
Bulk restaurant import.

Responsibilities:
- Read a CSV of restaurants (name, location, cuisines).
- Prepare the search index and Bloom filter.
- Create each restaurant through the same path as the HTTP API.
"""
