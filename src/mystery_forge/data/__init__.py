"""Authored, static series content."""
