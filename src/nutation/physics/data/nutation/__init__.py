"""Nutation series coefficient tables."""
