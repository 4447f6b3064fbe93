"""Utilities for the SafeDict toolkit."""
