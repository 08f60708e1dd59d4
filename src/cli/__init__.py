"""Command-line layer (Typer + Rich).

Why:
- Only wiring and presentation: parse options, call the core, print.
"""
