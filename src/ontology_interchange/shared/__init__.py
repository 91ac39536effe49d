"""Shared models used across formats."""
