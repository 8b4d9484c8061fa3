"""Service layer: operations returning ServiceResult.

Services may import from the domain layer and the composition root.
They must never import from commands or output.
"""
