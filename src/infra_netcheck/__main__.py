#!/usr/bin/env python3
"""
Entry point for running infra_netcheck as a module
This allows running: python -m infra_netcheck
"""

from infra_netcheck.cli import app

if __name__ == "__main__":
    app()
