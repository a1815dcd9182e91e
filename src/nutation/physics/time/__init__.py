"""Contains classes that represent the instant a nutation is evaluated for.

:class:`.JulianDate` is an immutable ``float`` value, while :class:`.JulianDateRepository` is the
mutable handle that nutation engines observe and derive their time arguments from.
"""
