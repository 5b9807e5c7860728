"""Domain rules (field validation, error taxonomy) free of FastAPI and storage."""
