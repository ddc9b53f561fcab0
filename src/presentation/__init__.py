"""Presentation Layer - FastAPI routers, schemas and dependency wiring."""
