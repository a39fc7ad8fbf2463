from blessed import Terminal

from encore.interfaces import LineDisplay
from encore.core.output import stream

class BlessedDisplay(LineDisplay):
    '''
    Draws the line being edited with the terminal's own clear and cursor movement sequences
    terminal: the blessed Terminal the keys come from
    out: the stream to draw to
    prompt: shown in front of the line
    '''
    def __init__(self, terminal: Terminal, out: stream.Base, prompt: str = '') -> None:
        self.terminal = terminal
        self.out = out
        self.prompt = prompt

    def redraw(self, buffer: str, cursor: int) -> None:
        '''Overrides a method in LineDisplay'''
        assert 0 <= cursor <= len(buffer)
        text = '\r' + self.terminal.clear_eol + self.prompt + buffer
        back = len(buffer) - cursor
        if back > 0:
            text += self.terminal.move_left(back)
        self.out.write_raw(text)

    def newline(self) -> None:
        '''Overrides a method in LineDisplay'''
        # The prompt comes back with the next redraw, after anything the host prints
        self.out.write_raw('\n')
