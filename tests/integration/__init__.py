"""
Integration test package for the task board.

Tests use the Flask test client and demonstrate:
- Authentication redirect flows
- Session-backed task storage
- Theme cookie round-trips
- Action log side effects
"""
