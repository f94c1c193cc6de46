"""Manifest parsing helpers."""
