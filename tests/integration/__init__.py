"""
API test package for the Todo Service.

This package contains tests for the /todo endpoints.
Tests use the Flask test client and demonstrate:
- CRUD operation testing
- Input validation testing
- Error handling testing
"""
