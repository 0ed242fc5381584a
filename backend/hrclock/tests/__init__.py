"""
Test package for the HR Clock backend.

Contains tests for the validation rules, request/response schemas,
mappers, the API error surface and the development server.
"""
