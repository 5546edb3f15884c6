from .gateway import generate_bias_audit, response_format
from .prompt import build_prompt
from .schema import REQUIRED_FIELDS, RESPONSE_SCHEMA, parse_analysis_result, validate_result_obj

__all__ = [
    "REQUIRED_FIELDS",
    "RESPONSE_SCHEMA",
    "build_prompt",
    "generate_bias_audit",
    "parse_analysis_result",
    "response_format",
    "validate_result_obj",
]
