from enum import Enum
from typing import List

class Key(str, Enum):
    CHAR = 'char'
    BACKSPACE = 'backspace'
    DELETE = 'delete'
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    OTHER = 'other'

class KeyEvent:
    '''
    A single key press
    key: what kind of key was pressed
    char: the character typed if key is Key.CHAR ('\\n' for enter), otherwise an empty string
    '''
    __slots__ = ('key', 'char')

    def __init__(self, key: Key, char: str = '') -> None:
        assert isinstance(key, Key)
        assert (key == Key.CHAR) == (len(char) == 1), 'char events need exactly one character: ' + repr(char)
        object.__setattr__(self, 'key', key)
        object.__setattr__(self, 'char', char)

    def __setattr__(self, name, value):
        raise AttributeError('KeyEvent is immutable')

    @staticmethod
    def of_char(char: str) -> 'KeyEvent':
        return KeyEvent(Key.CHAR, char)

    @staticmethod
    def from_text(text: str) -> List['KeyEvent']:
        '''One character event per character of text, newlines included'''
        return [KeyEvent.of_char(c) for c in text]

    def is_newline(self) -> bool:
        return self.key == Key.CHAR and self.char == '\n'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyEvent):
            return NotImplemented
        return self.key == other.key and self.char == other.char

    def __hash__(self) -> int:
        return hash((self.key, self.char))

    def __repr__(self) -> str:
        if self.key == Key.CHAR:
            return 'KeyEvent(' + repr(self.char) + ')'
        return 'KeyEvent(' + self.key.name + ')'

ENTER = KeyEvent.of_char('\n')
BACKSPACE = KeyEvent(Key.BACKSPACE)
DELETE = KeyEvent(Key.DELETE)
UP = KeyEvent(Key.UP)
DOWN = KeyEvent(Key.DOWN)
LEFT = KeyEvent(Key.LEFT)
RIGHT = KeyEvent(Key.RIGHT)
OTHER = KeyEvent(Key.OTHER)
