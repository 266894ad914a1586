"""Utility functions for link2code."""
