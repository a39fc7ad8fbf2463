#!/usr/bin/python3

import sys
import time
import logging
from typing import Any, Callable, Optional

from encore.interfaces import KeySource
from encore.core import Console, ConsoleArgumentParser, ParseResult
from encore.core.util import set_color_output, set_verbose, color, prompt_color, bad_color
from encore.frontends.terminal import (
    Example, Arguments, parse_args, default_key_source, LineBufferedSource)
from encore.core.output import stream, Output

logging.basicConfig()

set_verbose(False)
if sys.version_info < (3, 8):
    logging.error('Needs at least Python 3.8!')

POLL_INTERVAL = 0.01

def build_input_parser() -> ConsoleArgumentParser:
    parser = ConsoleArgumentParser(description='This is an example app')
    parser.add_argument('INPUT', help='The input string')
    return parser

def react_to_line(line: str) -> Optional[str]:
    if line == 'quit':
        return None
    else:
        return line.upper()

def react_to_arguments(result: ParseResult) -> Optional[str]:
    if not result.ok():
        return color(bad_color, str(result.error))
    assert result.matches is not None
    return react_to_line(result.matches.INPUT)

def host_loop(console: Console, output: Output) -> None:
    '''Stand in for the main loop of an application, which polls the console now and then'''
    while console.is_open():
        message = console.poll()
        if message is not None:
            output.show(message)
        else:
            time.sleep(POLL_INTERVAL)
    # Messages sent right before the console closed are still waiting
    message = console.poll()
    while message is not None:
        output.show(message)
        message = console.poll()

def main(args: Arguments, output: Output, key_source: KeySource) -> None:
    builder: Callable[[], Any]
    reaction: Callable[[Any], Optional[str]]
    if args.example == Example.MINIMAL:
        builder = lambda: (lambda line: line)
        reaction = react_to_line
    elif args.example == Example.ARGUMENTS:
        builder = build_input_parser
        reaction = react_to_arguments
    else:
        assert False, 'invalid example ' + repr(args.example)
    prompt = color(prompt_color, args.prompt)
    with Console(builder, reaction, key_source=key_source, out=output.out, prompt=prompt) as console:
        output.detail('Console opened with the ' + args.example.value + ' example')
        host_loop(console, output)
    output.detail('Console closed')

if __name__ == '__main__':
    out_stream = stream.Std(sys.stdout)
    try:
        args = parse_args(sys.argv)
        set_color_output(args.show_color)
        set_verbose(args.show_verbose)
        output = Output(args.show_verbose, out_stream)
        if args.line_mode:
            key_source: KeySource = LineBufferedSource(sys.stdin)
        else:
            key_source = default_key_source()
        main(args, output, key_source)
    except RuntimeError as e:
        logging.error(e)
        exit(1)
