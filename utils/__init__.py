"""Shared file helpers."""
