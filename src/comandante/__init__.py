"""comandante package."""

__all__ = [
    "CommandBuilder",
    "CommandContext",
    "CommandNotFoundError",
    "CommandRegister",
    "CommandRunningError",
    "CommandSyntaxError",
    "Dispatcher",
    "Resolution",
    "tokenize",
]
__version__ = "0.1.0"

from .context import CommandContext
from .dispatcher import Dispatcher, Resolution
from .errors import CommandNotFoundError, CommandRunningError, CommandSyntaxError
from .register import CommandBuilder, CommandRegister
from .tokenizer import tokenize
