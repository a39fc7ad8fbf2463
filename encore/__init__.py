'''
A line editing console that runs alongside your app on its own thread
'''
from encore.interfaces import CommandProcessor, KeySource, LineDisplay
from encore.core import (
    Key,
    KeyEvent,
    LineEditor,
    Console,
    ConsoleError,
    ConsoleArgumentParser,
    ParseResult,
    UsageError,
    FunctionProcessor,
    ArgumentParserProcessor,
    as_processor,
    ScriptedKeySource,
)

__version__ = '0.1.0'
