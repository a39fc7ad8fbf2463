import logging
import queue
from typing import Generic, Optional, TypeVar

M = TypeVar('M')

class Mailbox(Generic[M]):
    '''
    Ordered, unbounded delivery of messages from one producer thread to one consumer thread
    Once discarded (the consumer is gone) further messages are dropped
    '''
    def __init__(self) -> None:
        self._queue: 'queue.SimpleQueue[M]' = queue.SimpleQueue()
        self._discarded = False

    def send(self, message: M) -> bool:
        '''Queue a message, returns False if it was dropped because nobody will read it'''
        if self._discarded:
            logging.debug('Dropping message sent to discarded mailbox: ' + repr(message))
            return False
        self._queue.put(message)
        return True

    def receive(self) -> Optional[M]:
        '''Get the oldest message without blocking, or None if there isn't one'''
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def discard(self) -> None:
        self._discarded = True

    def discarded(self) -> bool:
        return self._discarded
