"""
Utility modules for the Travel Bucket List planner.
"""

from travel_bucket_list.config import LogLevel
from travel_bucket_list.utils.error_handling import (
    BucketListError,
    StorageError,
    handle_errors,
    safe_execute,
    with_retry,
)
from travel_bucket_list.utils.helpers import (
    MONTH_LABELS,
    add_months,
    clamp,
    coerce_float,
    coerce_int,
    coerce_optional_float,
    format_price,
    generate_trip_id,
    month_label,
    round_half_up,
)
from travel_bucket_list.utils.logging import ServiceLogger, get_logger, setup_logging

__all__ = [
    "MONTH_LABELS",
    "BucketListError",
    "LogLevel",
    "ServiceLogger",
    "StorageError",
    "add_months",
    "clamp",
    "coerce_float",
    "coerce_int",
    "coerce_optional_float",
    "format_price",
    "generate_trip_id",
    "get_logger",
    "handle_errors",
    "month_label",
    "round_half_up",
    "safe_execute",
    "setup_logging",
    "with_retry",
]
