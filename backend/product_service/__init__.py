"""Product Service: CRUD REST API for products (FastAPI + async SQLAlchemy)."""
