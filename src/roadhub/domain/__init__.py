"""Domain layer: road maps, reachability, and capital election.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
