"""
Application Layer

Contains the room handlers and the services they share.
This layer orchestrates domain objects and infrastructure adapters.

Structure:
- commands/: Room lifecycle requests and handlers (generate, join, close, add, remove)
- services/: Shared orchestration (playlist-to-room song sync)
- interfaces/: Port interfaces for infrastructure adapters
- results.py: The response envelope
- functions.py: Name-based dispatch used by the HTTP surface
"""
