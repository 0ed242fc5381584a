"""
HR Clock backend.

Validated request/response DTOs for clocking, teams, users and password
reset, the mappers that project domain objects into them, and the
development server tooling.
"""

__version__ = "1.0.0"
