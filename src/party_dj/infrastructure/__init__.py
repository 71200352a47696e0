"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Persistence (aiosqlite room document store)
- Spotify (httpx playlist client)
- Web (FastAPI callable-function surface)
"""
