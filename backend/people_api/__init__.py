"""People API Package: CRUD service for person records.

Invariants:
    - Package root holds no executable code beyond the version string
"""

__version__ = "1.0.0"
