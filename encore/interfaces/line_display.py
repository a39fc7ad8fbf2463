from abc import abstractmethod

class LineDisplay:
    '''Shows the line currently being edited'''

    @abstractmethod
    def redraw(self, buffer: str, cursor: int) -> None:
        '''Replace the visible line with buffer, and place the visual cursor at offset cursor'''
        raise NotImplementedError()

    @abstractmethod
    def newline(self) -> None:
        '''Move to a fresh line after a line has been submitted'''
        raise NotImplementedError()
