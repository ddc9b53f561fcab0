"""
Domain Layer - Entities, value objects and repository contracts.

This layer has no dependency on frameworks or infrastructure.
"""
