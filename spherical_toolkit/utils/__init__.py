"""
Shared utilities: configuration, logging, exceptions and argument checks.
"""
