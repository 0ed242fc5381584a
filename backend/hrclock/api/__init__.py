"""FastAPI application shell and error surface."""
