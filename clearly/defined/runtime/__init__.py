"""Runtime layer: request chunking and REST execution."""
