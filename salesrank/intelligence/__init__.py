from .engine import EstimationEngine, get_engine
from .formatter import EstimateFormatter
from .narrative import EstimationOutput, build_narrative, compose_output
from .validator import EstimationInput, validate_input

__all__ = [
    "EstimationEngine",
    "get_engine",
    "EstimateFormatter",
    "EstimationOutput",
    "build_narrative",
    "compose_output",
    "EstimationInput",
    "validate_input",
]
