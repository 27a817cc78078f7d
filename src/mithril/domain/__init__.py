"""Domain layer: the replay wrapper and its error taxonomy.

This layer depends only on stdlib.
It must never import from services, commands, config, or output.
It never logs; failures are returned to the caller as values.
"""
