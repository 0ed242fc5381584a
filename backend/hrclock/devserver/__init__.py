"""Development server: daily request log file and /api reverse proxy."""
