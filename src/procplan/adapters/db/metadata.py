"""The ``MetaData`` every PROCPLAN table is declared on.

Constraints and indexes left unnamed in the table definitions get their
names from ``NAMING_CONVENTION``; the migration scripts use the same names.
"""

from sqlalchemy import MetaData

NAMING_CONVENTION = {
    "pk": "pk_%(table_name)s",
    "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    # check constraints must be given a short name, which is prefixed here
    "ck": "ck_%(table_name)s_%(constraint_name)s",
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)
