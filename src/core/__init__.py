"""
Core business logic package for NomadSuite travel compliance.

All calculation logic, models and configuration live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
