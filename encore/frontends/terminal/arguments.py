from typing import List
import sys
import argparse
import logging
from enum import Enum

class Example(str, Enum):
    MINIMAL = 'minimal'
    ARGUMENTS = 'arguments'

class Arguments:
    '''
    show_verbose: if to show verbose output
    show_color: if to use terminal colors in output
    example: which demo processor to run the console with
    line_mode: if to read whole lines instead of raw keys even on an interactive terminal
    prompt: text shown in front of the line being edited
    '''
    def __init__(
        self,
        show_verbose: bool,
        show_color: bool,
        example: Example,
        line_mode: bool,
        prompt: str
    ) -> None:
        self.show_verbose = show_verbose
        self.show_color = show_color
        self.example = example
        self.line_mode = line_mode
        self.prompt = prompt

    @staticmethod
    def default() -> 'Arguments':
        return Arguments(
            False,
            False,
            Example.MINIMAL,
            False,
            '> ',
        )

def parse_args(argv: List[str]) -> Arguments:
    '''
    Parse command line arguments
    argv: A list of str arguments (should include the program name like sys.argv)
    '''
    parser = argparse.ArgumentParser(description='Run an encore console, every line typed is echoed back in upper case until "quit"')
    parser.add_argument('-e', '--example', choices=[e.value for e in Example], default=Example.MINIMAL.value, help='which command processor to use: "minimal" takes lines as they are, "arguments" parses them with a grammar that takes one INPUT')
    parser.add_argument('-l', '--line-mode', action='store_true', help='read whole lines, without arrow keys or history (default when stdin is not a terminal)')
    parser.add_argument('-p', '--prompt', type=str, default='> ', help='text shown in front of the line being edited')
    parser.add_argument('-C', '--no-color', action='store_true', help='disable color output (default for non-interactive sessions)')
    parser.add_argument('--color', action='store_true', help='force color output (default for interactive sessions)')
    parser.add_argument('--verbose', action='store_true', help='verbose output, mostly used for debugging this program')

    args = parser.parse_args(args=argv[1:]) # chop off the first argument (program name)

    show_color = False
    if args.no_color:
        if args.color:
            logging.warning('ignoring --color, since --no-color was also specified')
        show_color = False
        logging.info('color output disabled')
    elif args.color:
        show_color = True
        logging.info('color output enabled')
    elif hasattr(sys.stdout, 'isatty') and sys.stdout.isatty():
        # If we're not being run interactivly, we shouldn't use terminal color codes
        show_color = True
    else:
        show_color = False

    show_verbose = bool(args.verbose)
    logging.info('verbose output ' + ('enabled' if show_verbose else 'disabled'))

    return Arguments(
        show_verbose,
        show_color,
        Example(args.example),
        bool(args.line_mode),
        args.prompt
    )
