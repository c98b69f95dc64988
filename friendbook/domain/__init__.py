"""Domain types and rules that do not depend on FastAPI or the database."""
