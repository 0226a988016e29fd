"""
CLI module for cmdb.

Provides the command-line interface using Click.
"""

from cmdb.cli.main import cli, main

__all__ = ["main", "cli"]
