"""
CLI entry point for the spherical-toolkit command.
"""
from spherical_toolkit.runner import main

# Re-export main for the console_scripts entry point
__all__ = ['main']

if __name__ == '__main__':
    raise SystemExit(main())
