"""
Entry point for running SpecPilot as a module.

Usage:
    python -m specpilot [command] [options]
"""

from specpilot.cli import main

if __name__ == "__main__":
    main()
