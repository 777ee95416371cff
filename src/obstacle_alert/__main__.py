"""
Entry point for running the obstacle alert system as a module.

Usage:
    python -m obstacle_alert [--interval SECONDS | --once | --image PATH]
"""

from .cli import main

if __name__ == "__main__":
    main()
