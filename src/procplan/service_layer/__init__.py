"""Service layer for PROCPLAN.

Implements application use-cases: command handlers, result values, the
message bus, and transaction boundaries. Talks to storage only through
`procplan.interfaces`.

Dependency rule: may import `procplan.domain` and `procplan.interfaces`, but
not `procplan.adapters` or `procplan.entrypoints`.
"""
