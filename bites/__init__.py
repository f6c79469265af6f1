"""
Bites restaurant directory API.

Responsibilities:
- Expose restaurants, reviews and cuisines over HTTP.
- Delegate storage, ranking, de-duplication and search to Redis Stack.
"""
