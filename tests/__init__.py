"""
rssnorm Test Suite.

- unit/: Component tests (relations, media, enclosures, item, feed, services, settings)
- integration/: Full pipeline over decoder-shaped documents
- conftest.py: Shared fixtures and test configuration

Run tests with: pytest
Run with coverage: pytest --cov=rssnorm
"""
