from themelint.parser.errors import ParseError
from themelint.parser.transformer import parse_scss

__all__ = ["ParseError", "parse_scss"]
