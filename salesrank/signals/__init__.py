from .calibration import (
    AMAZON_CATEGORY_CALIBRATION,
    CalibrationPoint,
    CalibrationRecord,
    CalibrationTable,
    build_record,
    get_calibration_table,
    load_calibration_file,
    load_calibration_table,
)
from .estimator import Method, SalesEstimate, SalesEstimator, round_to_month

__all__ = [
    "AMAZON_CATEGORY_CALIBRATION",
    "CalibrationPoint",
    "CalibrationRecord",
    "CalibrationTable",
    "build_record",
    "get_calibration_table",
    "load_calibration_file",
    "load_calibration_table",
    "Method",
    "SalesEstimate",
    "SalesEstimator",
    "round_to_month",
]
