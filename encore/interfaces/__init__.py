'''
This module contains the abstract interfaces pieces of encore use to talk to each other
'''
from .command_processor import CommandProcessor
from .key_source import KeySource
from .line_display import LineDisplay
