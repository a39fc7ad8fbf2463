from abc import abstractmethod
from typing import Any

class CommandProcessor:
    '''An interface for turning a line submitted by the user into a parsed value'''

    @abstractmethod
    def parse(self, line: str) -> Any:
        '''Parses a single line of input
        line: the submitted line, already trimmed
        Returns whatever the reaction callback of the console expects
        '''
        raise NotImplementedError()
