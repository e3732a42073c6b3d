"""Core translation and speech session logic."""
