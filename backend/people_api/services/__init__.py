"""Services: persistence and orchestration behind the routes.

Invariants:
    - Services never build HTTP responses; routes do
"""
