from heoslink.parsing.payload.decode import format_number, parse_payload

__all__ = ["format_number", "parse_payload"]
