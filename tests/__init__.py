"""
Test suite for the Todo Service.

This package contains:
- unit/: Tests of single modules (models, validation, store, service, client)
- integration/: HTTP-level tests through the Flask test client
- contracts/: Responses checked against contracts/openapi.yaml
- security/: Adversarial input handling
- smoke/: Checks against a live server (skipped when none is running)
"""
