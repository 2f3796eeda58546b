"""Domain layer — value types, display states, and records.

This layer depends only on stdlib.
It must never import from services, commands, or config.
"""
