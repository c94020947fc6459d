"""windtrader: parse-only syntax validator for SysML v2 textual models.

Reads a document from standard input, runs it through a grammar-driven
parser and reports syntactic validity through well-defined exit codes.
"""

from windtrader.version import __version__

__all__: list[str] = ["__version__"]
