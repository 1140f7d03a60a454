"""Chore marketplace lifecycle and notification core."""
