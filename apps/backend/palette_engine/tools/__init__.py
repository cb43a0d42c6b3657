"""Palette tools."""
