from encore.core.util import color
from . import stream

class Output:
    '''An object that manages text output to the user'''
    def __init__(self, verbose: bool, show_stream: stream.Base) -> None:
        self.verbose = verbose
        self.out = show_stream

    def show(self, *msg) -> None:
        self.out.write(' '.join(map(lambda m: str(m), msg)))

    # Only shown when verbose, used for details about the console itself
    def detail(self, *msg) -> None:
        if self.verbose:
            self.show(color('37', ' '.join(map(lambda m: str(m), msg))))
