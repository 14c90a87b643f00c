#!/usr/bin/env python3
"""Development runner for the keymint CLI."""

from keymint.cli import cli

if __name__ == "__main__":
    cli()
