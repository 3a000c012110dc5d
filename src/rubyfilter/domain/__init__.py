"""Domain layer: command scanning, ruby annotations, and segments.

This layer depends only on stdlib.
It must never import from services, pipeline, commands, or config.
"""
