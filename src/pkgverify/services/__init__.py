"""Service layer — verification engine, error policies, CLI-facing results.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
