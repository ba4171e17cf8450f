"""Host runtime for canvas-based frame loops."""
