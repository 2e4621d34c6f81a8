"""ORM Models: SQLAlchemy declarative models.

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all runs
"""

from people_api.models.person import Person  # noqa: F401
