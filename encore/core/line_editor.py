from typing import List, Optional, Tuple

from encore.interfaces import LineDisplay
from .key import Key, KeyEvent

class LineEditor:
    '''
    Owns the line being composed, the cursor within it and the history of submitted lines
    Key events are applied one at a time with feed(), which returns the trimmed line when one is submitted
    display: where redraws go, or None to track state only
    '''
    def __init__(self, display: Optional[LineDisplay] = None) -> None:
        self.display = display
        self._buffer: List[str] = []
        self._cursor = 0
        self._history: List[str] = []
        self._history_index: Optional[int] = None # None when not browsing history

    def buffer(self) -> str:
        return ''.join(self._buffer)

    def cursor(self) -> int:
        return self._cursor

    def history(self) -> Tuple[str, ...]:
        return tuple(self._history)

    def history_index(self) -> Optional[int]:
        '''Index of the history entry being shown, or None if not browsing history'''
        return self._history_index

    def feed(self, event: KeyEvent) -> Optional[str]:
        '''Apply a key event, returns the submitted line if this event submitted one'''
        if event.key == Key.CHAR:
            if event.char == '\n':
                return self._submit()
            self._buffer.insert(self._cursor, event.char)
            self._cursor += 1
        elif event.key == Key.BACKSPACE:
            if self._cursor == 0:
                return None
            self._cursor -= 1
            del self._buffer[self._cursor]
        elif event.key == Key.DELETE:
            if self._cursor >= len(self._buffer):
                return None
            del self._buffer[self._cursor]
        elif event.key == Key.LEFT:
            self._cursor = max(self._cursor - 1, 0)
        elif event.key == Key.RIGHT:
            self._cursor = min(self._cursor + 1, len(self._buffer))
        elif event.key == Key.UP:
            if not self._history:
                return None
            if self._history_index is None:
                self._history_index = len(self._history) - 1
            else:
                self._history_index = max(self._history_index - 1, 0)
            self._load(self._history[self._history_index])
        elif event.key == Key.DOWN:
            if self._history_index is None:
                return None
            if self._history_index >= len(self._history) - 1:
                self._history_index = None
                self._load('')
            else:
                self._history_index += 1
                self._load(self._history[self._history_index])
        else:
            return None
        self._redraw()
        return None

    def _submit(self) -> str:
        line = self.buffer().strip()
        if line:
            self._history.append(line)
        self._history_index = None
        self._buffer = []
        self._cursor = 0
        if self.display is not None:
            self.display.newline()
        return line

    def _load(self, line: str) -> None:
        self._buffer = list(line)
        self._cursor = len(self._buffer)

    def _redraw(self) -> None:
        assert 0 <= self._cursor <= len(self._buffer)
        if self.display is not None:
            self.display.redraw(self.buffer(), self._cursor)

    def refresh(self) -> None:
        '''Redraw the current line without changing anything'''
        self._redraw()
