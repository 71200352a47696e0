"""Persistence adapters backed by aiosqlite."""
