"""Ecommerce order placement core."""
