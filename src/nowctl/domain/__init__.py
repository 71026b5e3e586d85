"""Domain layer — domain names, error codes, and platform constants.

This layer depends only on stdlib, pydantic, and the Public Suffix List.
It must never import from services, infrastructure, commands, or config.
"""
