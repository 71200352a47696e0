"""PartyDJ room functions: collaborative Spotify playlists shared through short room codes."""

__version__ = "0.1.0"
