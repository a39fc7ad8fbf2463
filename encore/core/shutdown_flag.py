import threading
from typing import Optional

class ShutdownFlag:
    '''
    A boolean shared between a console's background thread and its handle
    Starts cleared, and once set it stays set
    '''
    def __init__(self) -> None:
        self._event = threading.Event()

    def set(self) -> bool:
        '''Set the flag, returns False if it was already set'''
        if self._event.is_set():
            return False
        self._event.set()
        return True

    def is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: Optional[float]) -> bool:
        '''Block until the flag is set or timeout seconds pass, returns if it is set'''
        return self._event.wait(timeout)
