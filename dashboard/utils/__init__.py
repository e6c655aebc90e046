"""Utility helpers for the dashboard core."""
