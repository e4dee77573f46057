"""Domain layer - entities, value objects, events and ports.

CRITICAL: Nothing in this package may import sqlalchemy, pydantic, redis or
aiohttp.
"""
