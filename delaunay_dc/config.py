"""
Default settings for the triangulator, validation and dataset helpers.

Values here are defaults only; every function that reads one also takes
a keyword argument to override it per call.
"""

# ---------------------------------------------------------------
# INPUT CHECKING
# ---------------------------------------------------------------

# Reject unsorted / duplicate input before building any edges.
VALIDATE_INPUT = True


# ---------------------------------------------------------------
# VALIDATION
# ---------------------------------------------------------------

EPS = 1e-12

# The edge-crossing check is O(E^2); skip it above this many edges.
CROSSING_CHECK_MAX = 2000


# ---------------------------------------------------------------
# DATASETS
# ---------------------------------------------------------------

DEFAULT_RADIUS = 100.0
DEFAULT_SEED = 42
