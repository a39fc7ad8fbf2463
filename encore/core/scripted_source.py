import queue
import contextlib
import threading
from typing import Iterable, Iterator, Optional

from encore.interfaces import KeySource, LineDisplay
from encore.core.output import stream, NullDisplay
from .key import KeyEvent, OTHER

class ScriptedKeySource(KeySource):
    '''
    Plays back key events prepared by the program instead of read from a terminal (headless hosts, tests)
    events: events available right away
    end: if to report the end of input after events, otherwise more can be fed later
    poll_interval: seconds to wait for an event before giving the console a chance to notice it was closed
    '''
    def __init__(self, events: Iterable[KeyEvent] = (), end: bool = True, poll_interval: float = 0.01) -> None:
        self._queue: 'queue.SimpleQueue[Optional[KeyEvent]]' = queue.SimpleQueue()
        self.poll_interval = poll_interval
        self.entered = threading.Event()
        self.exited = threading.Event()
        self.feed(events)
        if end:
            self.finish()

    def feed(self, events: Iterable[KeyEvent]) -> None:
        '''Add events, can be called from any thread'''
        for event in events:
            assert isinstance(event, KeyEvent)
            self._queue.put(event)

    def feed_text(self, text: str) -> None:
        self.feed(KeyEvent.from_text(text))

    def finish(self) -> None:
        '''Report the end of input once the events fed so far are used up'''
        self._queue.put(None)

    @contextlib.contextmanager
    def opened(self) -> Iterator[None]:
        '''Overrides a method in KeySource'''
        self.entered.set()
        try:
            yield
        finally:
            self.exited.set()

    def read_event(self) -> Optional[KeyEvent]:
        '''Overrides a method in KeySource'''
        try:
            return self._queue.get(timeout=self.poll_interval)
        except queue.Empty:
            return OTHER

    def width(self) -> int:
        '''Overrides a method in KeySource'''
        return 80

    def create_display(self, out: stream.Base, prompt: str) -> LineDisplay:
        '''Overrides a method in KeySource'''
        return NullDisplay()
