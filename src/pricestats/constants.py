"""
Application-wide constants for pricestats.

Sentinel values returned by aggregate queries on empty collections, and
defaults shared by the logging and configuration layers.
"""

# Aggregate sentinels for empty collections
EMPTY_PRICE = -1
EMPTY_AVERAGE = -1.0

# Minimum number of records needed to compute a price change
MIN_RECORDS_FOR_CHANGE = 2

# Date handling
ISO_DATE_FORMAT = "%Y-%m-%d"

# Display defaults
DEFAULT_AVERAGE_PRECISION = 2
MAX_AVERAGE_PRECISION = 10

# Logging file rotation
BYTES_PER_MB = 1024 * 1024
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * BYTES_PER_MB
MIN_LOG_FILE_SIZE_BYTES = 1024
DEFAULT_LOG_BACKUP_COUNT = 5

# CLI record syntax: PRICE@DATE
RECORD_SEPARATOR = "@"
