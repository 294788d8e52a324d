"""
Visit Desk test suite.

Tests are organized by layer:
    tests/unit/         Services against an in-memory SQLite store
    tests/integration/  HTTP surface through FastAPI's TestClient

Run all tests:
    pytest
"""
