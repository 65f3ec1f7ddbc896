"""
BFHL Test Suite

Test organization:
- test_numeric.py, test_validation.py, test_ask_ai.py, test_config.py: unit tests
- test_dispatch.py: request classification and execution
- test_server.py: HTTP integration tests through TestClient
"""

__version__ = "1.0.0"
