"""
Routes package for the Todo Service.

This package contains the route blueprint:
- api: REST endpoints for the ``/todo`` resource and the health check
"""
