"""dictbench -- dict insertion micro-benchmark.

Compares direct key assignment against ``dict.update`` merges.
"""

__version__ = "0.1.0"
