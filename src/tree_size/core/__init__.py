"""Core walking and configuration logic."""
