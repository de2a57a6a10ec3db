"""Playback configuration, audio sinks, catalogue metadata models, lyrics and a local-network discovery server."""

__version__ = "0.1.0"