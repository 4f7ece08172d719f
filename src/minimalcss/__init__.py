"""minimalcss - reduce a stylesheet to the rules a document can use."""

from minimalcss.errors import MinimalCSSError, SelectorSyntaxError, StyleParseError
from minimalcss.minimize import minimize
from minimalcss.options import Options, Result

__version__ = "0.1.0"

__all__ = [
    "minimize",
    "Options",
    "Result",
    "MinimalCSSError",
    "SelectorSyntaxError",
    "StyleParseError",
    "__version__",
]
