"""
Core business logic package for the booking registry.

All validation, storage access and routing live here.
Lambda handlers in src/handlers/ are thin wrappers that call into registry/.
"""

__all__: list[str] = []
