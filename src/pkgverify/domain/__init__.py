"""Domain layer — package manifests, issue taxonomy, version rules.

This layer depends only on stdlib and the semver library.
It must never import from services, infrastructure, commands, or config.
"""
