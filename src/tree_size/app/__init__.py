"""Application layer: command-line interface and runner."""
