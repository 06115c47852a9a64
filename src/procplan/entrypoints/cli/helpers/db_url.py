"""Showing database URLs to people.

>>> sanitize_url("postgresql+psycopg://planner:s3cr3t@db:5432/procplan")
'postgresql+psycopg://planner:***@db:5432/procplan'
>>> sanitize_url("sqlite:///procplan.db")
'sqlite:///procplan.db'

Only the password component is masked; credentials passed as query
parameters are printed as given.
"""

from sqlalchemy.engine import make_url


def sanitize_url(url: str) -> str:
    """``url`` with its password shown as ``***``."""
    return make_url(url).render_as_string(hide_password=True)
