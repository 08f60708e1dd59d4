"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) and the unit model live here.
- The domain knows nothing about the CLI or configuration: only temperatures.
"""
