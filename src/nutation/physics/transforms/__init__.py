"""Nutation series data, evaluation, and the epoch-cached :class:`.Nutation` engine."""
