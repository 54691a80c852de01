"""Audit publisher backends."""
