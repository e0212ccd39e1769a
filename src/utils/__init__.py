"""
Generic utility functions shared across modules.

Includes numeric literal parsing, millisecond clock abstractions and
logging setup.
"""
