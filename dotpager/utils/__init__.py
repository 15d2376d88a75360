"""Utility helpers for dotpager."""
