from abc import abstractmethod
from typing import ContextManager, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from encore.core.key import KeyEvent
    from encore.core.output.stream import Base as Stream
    from .line_display import LineDisplay

class KeySource:
    '''A blocking source of key events, usually backed by a terminal'''

    @abstractmethod
    def opened(self) -> ContextManager[None]:
        '''Context in which events can be read (for terminals, raw mode is active inside it)'''
        raise NotImplementedError()

    @abstractmethod
    def read_event(self) -> Optional['KeyEvent']:
        '''Block until the next key event is available
        Returns None once input is exhausted, after which it will not be called again
        '''
        raise NotImplementedError()

    @abstractmethod
    def width(self) -> int:
        '''Width of the output area in columns'''
        raise NotImplementedError()

    @abstractmethod
    def create_display(self, out: 'Stream', prompt: str) -> 'LineDisplay':
        '''Make a display that draws the line being edited to out in a way that suits this input device
        Devices that already echo what is typed (line buffered terminals do) return a display that draws nothing
        '''
        raise NotImplementedError()
