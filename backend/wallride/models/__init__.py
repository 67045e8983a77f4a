"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Article is the aggregate root for custom field values

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from wallride.models.custom_field import CustomField  # noqa: F401
from wallride.models.article import Article  # noqa: F401
from wallride.models.custom_field_value import CustomFieldValue  # noqa: F401
