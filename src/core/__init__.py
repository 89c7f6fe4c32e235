"""Core domain layer.

This package holds typed models, errors, constants, and configuration.
It parses and validates analysis configs before any extraction runs.
"""
