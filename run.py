#!/usr/bin/env python3
"""
Main entry point for the Shape Drawing Robot application.
"""

from shapebot.main import main

if __name__ == "__main__":
    main()
