"""
Constants used by the traversal engines
"""

import math

# Minimum interpreter recursion limit applied by vertex_dfs.recursive
RECURSION_LIMIT = 10_000

# Default result of max_value for a missing start vertex; loses every comparison
MINIMUM_SENTINEL = -math.inf
