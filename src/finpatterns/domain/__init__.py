"""Domain layer: plans, simulators, account and recommendation factories, themes.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
