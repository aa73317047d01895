"""Table definitions for the ROSTER store.

``Person`` is the only table. Its column names are the ``@Name`` parameters of
the person SQL text, so `PersonModel.as_row()` binds directly.

| Column          | Type    | Notes                          |
|-----------------|---------|--------------------------------|
| Id              | INTEGER | primary key, assigned by store |
| FirstName       | TEXT    | not null                       |
| LastName        | TEXT    | not null                       |
| HeightInInches  | FLOAT   | not null                       |

Constraint names follow the `metadata` naming convention (``pk_Person``) so
Alembic revisions can refer to them.
"""

from __future__ import annotations

from sqlalchemy import Column, Float, Integer, MetaData, Table, Text

#: Shared metadata; Alembic's env.py targets it.
metadata = MetaData(
    naming_convention={
        "ix": "ix_%(table_name)s_%(column_0_N_label)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "pk": "pk_%(table_name)s",
    }
)

person = Table(
    "Person",
    metadata,
    Column("Id", Integer, primary_key=True, autoincrement=True),
    Column("FirstName", Text, nullable=False),
    Column("LastName", Text, nullable=False),
    Column("HeightInInches", Float, nullable=False),
)
