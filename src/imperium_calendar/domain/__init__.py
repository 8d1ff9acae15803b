"""Domain layer — date elements, codes, and calendar conversion.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
