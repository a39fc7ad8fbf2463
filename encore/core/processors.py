import argparse
import shlex
from typing import Any, Callable, IO, List, NoReturn, Optional

from encore.interfaces import CommandProcessor

PROGRAM_NAME = 'encore'

class UsageError(Exception):
    '''Raised by ConsoleArgumentParser instead of exiting the process, carries the formatted text'''
    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

class ConsoleArgumentParser(argparse.ArgumentParser):
    '''
    An argparse.ArgumentParser that can be used again and again inside a console
    Errors and --help raise UsageError (with everything argparse would have printed) instead of exiting
    '''
    def __init__(self, *args, **kwargs) -> None:
        self._pending_text = ''
        kwargs.setdefault('prog', PROGRAM_NAME)
        super().__init__(*args, **kwargs)

    def _print_message(self, message: str, file: Optional[IO[str]] = None) -> None:
        if message:
            self._pending_text += message

    def exit(self, status: int = 0, message: Optional[str] = None) -> NoReturn:
        if message:
            self._pending_text += message
        text = self._pending_text.rstrip('\n')
        self._pending_text = ''
        raise UsageError(text)

    def error(self, message: str) -> NoReturn:
        self._pending_text = ''
        self.exit(2, self.format_usage() + self.prog + ': error: ' + message + '\n')

class ParseResult:
    '''
    The result of parsing a line with an argument parser
    matches: the parsed namespace, or None if parsing failed
    error: formatted usage or error text if parsing failed (or help was requested), otherwise None
    '''
    def __init__(self, matches: Optional[argparse.Namespace], error: Optional[str]) -> None:
        assert (matches is None) != (error is None)
        self.matches = matches
        self.error = error

    def ok(self) -> bool:
        return self.matches is not None

    def __str__(self) -> str:
        if self.error is not None:
            return self.error
        return str(self.matches)

    def __repr__(self) -> str:
        return 'ParseResult(' + repr(self.matches) + ', ' + repr(self.error) + ')'

class FunctionProcessor(CommandProcessor):
    '''Makes any plain function that takes a string into a CommandProcessor'''
    def __init__(self, func: Callable[[str], Any]) -> None:
        assert callable(func)
        self.func = func

    def parse(self, line: str) -> Any:
        '''Overrides a method in CommandProcessor'''
        return self.func(line)

class ArgumentParserProcessor(CommandProcessor):
    '''
    Parses lines as if they were the command line arguments of a program
    parser: the grammar, must be a ConsoleArgumentParser so errors don't exit the process
    program_name: the name put in front of the line's tokens like argv[0], and shown in usage and errors
        (defaults to the parser's prog)
    '''
    def __init__(self, parser: ConsoleArgumentParser, program_name: Optional[str] = None) -> None:
        if not isinstance(parser, ConsoleArgumentParser):
            raise TypeError(
                'argument parsers used in a console must be ConsoleArgumentParsers, not ' + type(parser).__name__)
        if program_name is None:
            program_name = parser.prog
        else:
            parser.prog = program_name
        self.parser = parser
        self.program_name = program_name

    def parse(self, line: str) -> ParseResult:
        '''Overrides a method in CommandProcessor'''
        try:
            argv = [self.program_name] + shlex.split(line)
        except ValueError as e:
            return ParseResult(None, self.parser.format_usage() + self.parser.prog + ': error: ' + str(e))
        return parse_argv(self.parser, argv)

def parse_argv(parser: ConsoleArgumentParser, argv: List[str]) -> ParseResult:
    '''
    Parse arguments with the given parser
    argv: A list of str arguments (should include the program name like sys.argv)
    '''
    try:
        matches = parser.parse_args(args=argv[1:]) # chop off the first argument (program name)
    except UsageError as e:
        return ParseResult(None, e.text)
    return ParseResult(matches, None)

def as_processor(thing: Any) -> CommandProcessor:
    '''Turn anything that can parse lines into a CommandProcessor'''
    if isinstance(thing, CommandProcessor):
        return thing
    elif isinstance(thing, argparse.ArgumentParser):
        return ArgumentParserProcessor(thing)
    elif callable(thing):
        return FunctionProcessor(thing)
    else:
        raise TypeError(repr(thing) + ' can not be used to parse commands')
