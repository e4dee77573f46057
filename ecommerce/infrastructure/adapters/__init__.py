"""Adapters implementing the application and domain ports."""
