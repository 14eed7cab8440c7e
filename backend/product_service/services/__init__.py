"""Services: orchestration between the HTTP layer, the functional core and storage."""
