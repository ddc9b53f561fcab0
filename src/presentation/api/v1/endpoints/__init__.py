"""API v1 routers."""

from . import admin, dashboard, designs, freelancers, health

__all__ = ["admin", "dashboard", "designs", "freelancers", "health"]
