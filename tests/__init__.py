"""
AE Lingo - Test Suite
=====================
Unit and integration tests for the AE Lingo service.
Run with: pytest tests/ -v
"""
