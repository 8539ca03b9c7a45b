"""Scribe: archive an issue's comment thread to a file or another issue."""
