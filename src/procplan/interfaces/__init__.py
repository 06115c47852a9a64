"""Ports the service layer depends on.

``repositories`` declares one abstract repository per record kind and
``unit_of_work`` bundles them with commit and rollback. Adapters implement
these ABCs; handlers only ever see the abstract types.

Only ``procplan.domain`` is imported from here.
"""
