"""
dictbench/config.py -- Benchmark constants and defaults.

All tunable settings live here. The CLI overrides the timing defaults
per run through ``RunConfig``.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Workload
# ---------------------------------------------------------------------------

# Keys inserted by every case (1..100 inclusive)
KEYS = range(1, 101)

# ---------------------------------------------------------------------------
# Timing
# ---------------------------------------------------------------------------

# Seconds spent calling each case before measuring
DEFAULT_WARMUP = 2.0

# Seconds of measured calls per case
DEFAULT_TIME = 5.0

# Target length of one timed batch (seconds)
SAMPLE_INTERVAL = 0.1

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
