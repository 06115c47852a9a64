"""Adapters (infrastructure) for PROCPLAN.

Provide concrete implementations of the data-access interfaces: in-memory
repositories for tests and embedding, SQLAlchemy repositories and unit of
work, plus engine creation, schema metadata and migrations.

Dependency rule: may import `procplan.domain` and `procplan.interfaces`; the
domain must not import this package.
"""
