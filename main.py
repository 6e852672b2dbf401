#!/usr/bin/env python3
"""Translation Bridge - Entry point."""
from translation_bridge.cli.main import cli

if __name__ == "__main__":
    cli()
