"""Utility helpers for datebucket."""
