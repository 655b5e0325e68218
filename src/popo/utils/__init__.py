"""Utility helpers for popo."""
