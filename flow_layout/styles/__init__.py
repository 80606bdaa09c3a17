"""Colours and visual constants."""
