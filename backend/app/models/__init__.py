"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model is imported here so Base.metadata is complete for alembic and tests
"""

from app.models.expense import Expense  # noqa: F401
