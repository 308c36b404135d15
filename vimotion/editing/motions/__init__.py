"""Vim motions."""
