"""
Pytest test suite for the Washerman backend.

Test categories:
- Unit tests: validators, password hashing, settings, pydantic models
- Integration tests: services and ORM models against in-memory SQLite
- API tests: Full FastAPI app over httpx with in-memory SQLite
"""
