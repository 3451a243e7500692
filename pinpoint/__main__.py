"""
PinPoint Module Entry Point
============================

Allows running the PinPoint CLI via: python -m pinpoint
"""

from pinpoint.cli import main

if __name__ == "__main__":
    main()
