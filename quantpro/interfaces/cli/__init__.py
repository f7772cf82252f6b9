"""
CLI Interface - Command-line tools for QuantPro.

Provides commands for:
- Knowledge base search
- Project initialization for AI agents
- Domain listing
"""

from .main import app, main

__all__ = ["app", "main"]
