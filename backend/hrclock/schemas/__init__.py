"""
Pydantic schemas for API request/response validation.

Provides the request DTOs (validated against the field rules) and the
frozen response DTOs for clocks, clock requests, teams, users, working
times, password reset and report export.
"""
