"""Domain layer: configuration values, builders, and errors.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
