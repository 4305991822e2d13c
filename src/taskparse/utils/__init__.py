"""Utility helpers for taskparse."""
