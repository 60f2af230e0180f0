#!/usr/bin/env python3
"""
Test suite for the fruit matchmaking engine.

All tests are plain unit tests with no external services:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v

Shared fruit fixtures live in tests/fixtures/fruit_fixtures.py.
"""
