"""Core of temp-convert: domain, services and configuration.

Why:
- Nothing here prints or exits; the CLI decides how failures surface.
"""
