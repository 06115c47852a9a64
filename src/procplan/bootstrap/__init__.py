"""Composition root.

:func:`bootstrap` reads the database URL, builds a SQLAlchemy unit of work on
it and returns an :class:`AppContainer` holding a message bus whose handlers
are bound to that unit of work. Nothing in ``procplan.domain``,
``procplan.interfaces`` or ``procplan.service_layer`` imports this package.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
