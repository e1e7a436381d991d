from heoslink.parsing.message.decode import KEY_VALUE_SEPARATOR, PAIR_SEPARATOR, parse_message

__all__ = ["KEY_VALUE_SEPARATOR", "PAIR_SEPARATOR", "parse_message"]
