"""Entrypoints (inbound adapters) for PROCPLAN.

Expose the application to the outside world; currently the ``procplan`` CLI.
Parse and validate inputs, call the service layer through the bootstrapped
message bus, and present results.

Dependency rule: may import `procplan.bootstrap` and `procplan.service_layer`;
avoid importing `procplan.adapters` directly.
"""
