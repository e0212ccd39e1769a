"""
Configuration loading and validation.

Provides a strongly typed settings object loaded from environment variables
with upfront validation.
"""
