#!/usr/bin/env python3
"""
CLI entry point for lineup.cli module.

This allows running: python -m lineup.cli
"""

from .main import cli

if __name__ == "__main__":
    cli()
