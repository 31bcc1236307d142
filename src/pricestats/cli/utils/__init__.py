from .record_parser import build_collection, normalize_date, parse_record_spec

__all__ = ["build_collection", "normalize_date", "parse_record_spec"]
