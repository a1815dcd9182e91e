"""Astronomical time and nutation algorithms.

The goal is to make the algorithms as simple to use as possible, while keeping the numeric
coefficient tables separate from the code that evaluates them.
"""
