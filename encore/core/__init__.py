'''
This module contains the implementations that make up the core of encore
such as the line editor and the console that runs it on a background thread
'''
from .key import Key, KeyEvent
from .line_editor import LineEditor
from .shutdown_flag import ShutdownFlag
from .mailbox import Mailbox
from .scripted_source import ScriptedKeySource
from .processors import (
    PROGRAM_NAME,
    UsageError,
    ConsoleArgumentParser,
    ParseResult,
    FunctionProcessor,
    ArgumentParserProcessor,
    parse_argv,
    as_processor,
)
from .console import Console, ConsoleError
from . import output
from . import util
