"""Adapters for configuration and other infrastructure."""
