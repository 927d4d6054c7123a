"""clivo — permissive command-line option parsing and terminal prompts.

The parser turns a flat argument list into a ``dict[str, list[str]]``;
the prompt helpers wrap a blocking line reader.
"""

from clivo.core.models import FLAG_VALUE, POSITIONAL_KEY, OptionSpec, ParseRequest
from clivo.core.parser import parse_arguments, parse_cli
from clivo.exceptions import ClivoError, ConfigurationError
from clivo.version import __version__

__all__: list[str] = [
    "FLAG_VALUE",
    "POSITIONAL_KEY",
    "ClivoError",
    "ConfigurationError",
    "OptionSpec",
    "ParseRequest",
    "__version__",
    "parse_arguments",
    "parse_cli",
]
