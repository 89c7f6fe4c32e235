"""Command-line interface.

This package parses and validates arguments and maps failures to exit codes.
"""
