'''
Key sources for interactive terminals and for line buffered input
'''
from .blessed_source import BlessedKeySource
from .blessed_display import BlessedDisplay
from .line_source import LineBufferedSource
from .default_source import default_key_source
from .arguments import Example, Arguments, parse_args
