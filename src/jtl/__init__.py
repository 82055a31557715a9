"""JTL document parsing primitives."""

from .base import (
    ElementRecord,
    EncodingError,
    EnvironmentMap,
    ElementTooShortError,
    JTLError,
    MalformedContentError,
    MissingDoctypeError,
    MissingPrefixError,
    MissingSeparatorError,
    NoAttributesFoundError,
    ParsedJTL,
    PatternEngineError,
)
from .lines import LineKind, classify_line, split_declarations
from .sections import Mode, SectionState, iter_declarations
from .env import extract_env, parse_env_declaration
from .elements import ATTRIBUTE_PATTERN, parse_element
from .parser import parse, parse_file, parse_text
from .serializer import render, stringify, stringify_env
from .config import JTLConfig, load_jtl_config
from .runner import ConversionResult, convert_file, convert_tree, find_documents

__all__ = [
    "ElementRecord",
    "EnvironmentMap",
    "ParsedJTL",
    "JTLError",
    "MissingDoctypeError",
    "MissingPrefixError",
    "MissingSeparatorError",
    "ElementTooShortError",
    "NoAttributesFoundError",
    "MalformedContentError",
    "PatternEngineError",
    "EncodingError",
    "LineKind",
    "classify_line",
    "split_declarations",
    "Mode",
    "SectionState",
    "iter_declarations",
    "extract_env",
    "parse_env_declaration",
    "ATTRIBUTE_PATTERN",
    "parse_element",
    "parse",
    "parse_file",
    "parse_text",
    "render",
    "stringify",
    "stringify_env",
    "JTLConfig",
    "load_jtl_config",
    "ConversionResult",
    "convert_file",
    "convert_tree",
    "find_documents",
]
