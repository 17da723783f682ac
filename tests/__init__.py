"""
Test suite for coinswap.

- tests/unit/ : unit tests for the client, catalog, calculator and session
"""
