from .value_parser import parse_value

__all__ = ["parse_value"]
