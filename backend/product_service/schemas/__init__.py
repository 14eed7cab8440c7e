"""API Schemas: pydantic transfer objects at the HTTP boundary."""
