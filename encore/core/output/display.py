from encore.interfaces import LineDisplay

class NullDisplay(LineDisplay):
    '''Keeps nothing on screen, for headless consoles and terminals that echo by themselves'''
    def redraw(self, buffer: str, cursor: int) -> None:
        '''Overrides a method in LineDisplay'''
        pass

    def newline(self) -> None:
        '''Overrides a method in LineDisplay'''
        pass
