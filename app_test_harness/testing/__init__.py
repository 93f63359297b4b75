"""Helpers for testing code built on the harness."""
