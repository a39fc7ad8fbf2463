import sys
import logging

from encore.interfaces import KeySource
from .blessed_source import BlessedKeySource
from .line_source import LineBufferedSource

def default_key_source() -> KeySource:
    '''Raw key input if stdin is an interactive terminal, line buffered input otherwise'''
    if hasattr(sys.stdin, 'isatty') and sys.stdin.isatty():
        logging.info('Reading keys from the terminal')
        return BlessedKeySource()
    else:
        logging.info('stdin is not a terminal, reading whole lines')
        return LineBufferedSource(sys.stdin)
