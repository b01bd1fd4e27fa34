"""
CLI module for Grafo.

The `grafo` command and the interactive menu shell it runs.
"""

from grafo_cli.main import app

__all__ = ["app"]
