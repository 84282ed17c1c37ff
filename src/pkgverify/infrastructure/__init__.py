"""Infrastructure layer — filesystem access and module path resolution.

All filesystem access is read-only. Modules here may use domain types
for their return values but never import from services, commands, or output.
"""
