"""FastAPI presentation."""
