"""Configuration: settings and the dependency container."""
