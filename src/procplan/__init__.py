"""PROCPLAN

Service-layer backend for assigning users to the procedures of a plan.
It validates requests, checks the related plan, procedure and user records,
and records each user's participation exactly once.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
