"""
Test suite for the task board application.

This package contains:
- unit/: single-component tests (services, pipeline, validation)
- integration/: end-to-end flows through the Flask test client
- security/: cookie hardening and output-encoding checks
"""
