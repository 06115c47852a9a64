"""Alembic migration scripts for PROCPLAN."""
