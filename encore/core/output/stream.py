import sys
import threading

class Base:
    '''An output stream that text and terminal control sequences can be written to'''
    def write(self, thing) -> None:
        '''Show anything that can be converted to a string, followed by a newline.'''
        self.write_raw(str(thing) + '\n')

    def write_raw(self, string: str) -> None:
        '''Write a string exactly as is, without a trailing newline.'''
        self.override_write(string)

    def override_write(self, string: str) -> None:
        '''Print a string to the stream.

        Input is always a string, and should be written unmodified.
        Only for overriding by child classes (not to be called externally).
        '''
        raise NotImplementedError()

class Std(Base):
    def __init__(self, file=sys.stdout) -> None:
        self.file = file
        self.lock = threading.Lock() # the console thread and the host both write
    def override_write(self, string: str) -> None:
        with self.lock:
            self.file.write(string)
            self.file.flush()

class String(Base):
    def __init__(self) -> None:
        self.buffer = ''
    def override_write(self, string: str) -> None:
        self.buffer += string
