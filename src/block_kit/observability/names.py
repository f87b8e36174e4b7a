# src/block_kit/observability/names.py

"""Standard metric names for block-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "parse_duration"

# Counters
PARSE_BLOCKS_CREATED = "parse_blocks_created"
# Labelled with kind: malformed_attributes, unmatched_closer, unterminated_block
PARSE_RECOVERIES_TOTAL = "parse_recoveries_total"

# Gauges
PARSE_MAX_DEPTH = "parse_max_depth"
