"""Domain layer for PROCPLAN.

Contains the record types (plans, procedures, users and their associations)
and the domain errors raised when a request breaks a business rule. This
package imports no framework code.

Dependency rule: do not import from `procplan.adapters` or `procplan.entrypoints`.
"""
