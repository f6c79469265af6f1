"""
Weather lookups for restaurant locations.

Responsibilities:
- Call the OpenWeatherMap current-weather endpoint.
- Cache responses in Redis with an expiry.
"""
