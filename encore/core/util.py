import logging
from typing import Optional

verbose = False

# if we print with colors and such
color_output = False

prompt_color = '1;94'
bad_color = '1;91'

def set_color_output(val: bool) -> None:
    global color_output
    assert isinstance(val, bool)
    color_output = val

# if string is not None, resets to normal at end
def color(color: Optional[str], string: str) -> str:
    string = str(string)
    result = ''
    if string == '':
        return ''
    if color_output:
        if color is not None:
            result += '\x1b[' + color + 'm'
        else:
            result += '\x1b[0m'
    if string:
        result += string
        if color_output and color:
            result += '\x1b[0m'
    return result

def set_verbose(new_verbose: bool) -> None:
    global verbose
    verbose = new_verbose
    logging.getLogger().setLevel(logging.DEBUG if new_verbose else logging.WARN)

if __name__ == '__main__':
    print('File meant to be imported, not run')
    exit(1)
