"""
Group control tests

Tests for scoring and the dispatcher's assignment of floor requests.
"""
