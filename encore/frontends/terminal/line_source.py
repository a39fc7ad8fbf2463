import sys
import contextlib
from collections import deque
from typing import ContextManager, Deque, IO, Optional

from encore.interfaces import KeySource, LineDisplay
from encore.core.output import stream, NullDisplay
from encore.core.key import KeyEvent

DEFAULT_WIDTH = 80

class LineBufferedSource(KeySource):
    '''
    Reads whole lines from a text file (stdin by default) and replays them as key events
    No editing happens mid-line, the terminal (if any) does the echoing
    '''
    def __init__(self, file: Optional[IO[str]] = None) -> None:
        self.file = file if file is not None else sys.stdin
        self._pending: Deque[KeyEvent] = deque()

    def opened(self) -> ContextManager[None]:
        '''Overrides a method in KeySource'''
        return contextlib.nullcontext()

    def read_event(self) -> Optional[KeyEvent]:
        '''Overrides a method in KeySource'''
        if not self._pending:
            line = self.file.readline()
            if not line:
                return None
            # A last line without a newline is still submitted
            self._pending.extend(KeyEvent.from_text(line.rstrip('\r\n') + '\n'))
        return self._pending.popleft()

    def width(self) -> int:
        '''Overrides a method in KeySource'''
        return DEFAULT_WIDTH

    def create_display(self, out: stream.Base, prompt: str) -> LineDisplay:
        '''Overrides a method in KeySource'''
        return NullDisplay()
