"""Procedural mystery-book generators and Mermaid diagram builders."""

__version__ = "0.4.0"
