from typing import ContextManager, Optional

from blessed import Terminal
from blessed.keyboard import Keystroke

from encore.interfaces import KeySource, LineDisplay
from encore.core.output import stream
from encore.core.key import Key, KeyEvent, ENTER, BACKSPACE, DELETE, UP, DOWN, LEFT, RIGHT, OTHER
from .blessed_display import BlessedDisplay

END_OF_INPUT = '\x04' # Ctrl+D

_named_keys = {
    'KEY_ENTER': ENTER,
    'KEY_BACKSPACE': BACKSPACE,
    'KEY_DELETE': DELETE,
    'KEY_UP': UP,
    'KEY_DOWN': DOWN,
    'KEY_LEFT': LEFT,
    'KEY_RIGHT': RIGHT,
}

_control_chars = {
    '\n': ENTER,
    '\r': ENTER,
    '\b': BACKSPACE,
    '\x7f': BACKSPACE,
}

def keystroke_to_event(keystroke: Keystroke) -> Optional[KeyEvent]:
    '''Convert a blessed keystroke into a KeyEvent, or None if it signals the end of input'''
    if keystroke.is_sequence:
        return _named_keys.get(keystroke.name or '', OTHER)
    text = str(keystroke)
    if text == '':
        # inkey() timed out
        return OTHER
    if text == END_OF_INPUT:
        return None
    if text in _control_chars:
        return _control_chars[text]
    if len(text) == 1 and text.isprintable():
        return KeyEvent(Key.CHAR, text)
    return OTHER

class BlessedKeySource(KeySource):
    '''
    Reads keys from an interactive terminal in cbreak mode
    terminal: the blessed Terminal to use, a new one by default
    poll_interval: seconds to wait for a key before giving the console a chance to notice it was closed
    '''
    def __init__(self, terminal: Optional[Terminal] = None, poll_interval: float = 0.1) -> None:
        self.terminal = terminal if terminal is not None else Terminal()
        self.poll_interval = poll_interval

    def opened(self) -> ContextManager[None]:
        '''Overrides a method in KeySource'''
        return self.terminal.cbreak()

    def read_event(self) -> Optional[KeyEvent]:
        '''Overrides a method in KeySource'''
        return keystroke_to_event(self.terminal.inkey(timeout=self.poll_interval))

    def width(self) -> int:
        '''Overrides a method in KeySource'''
        return self.terminal.width

    def create_display(self, out: stream.Base, prompt: str) -> LineDisplay:
        '''Overrides a method in KeySource'''
        return BlessedDisplay(self.terminal, out, prompt)
