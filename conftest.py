# Lets pytest import encore from the project root without installing it

import logging

class FailOnWarningHandler(logging.NullHandler):
    def __init__(self):
        logging.NullHandler.__init__(self)
        self.formatter = logging.Formatter('%(levelname)s:%(name)s:%(threadName)s:%(message)s')

    def handle(self, record):
        # Levels above INFO (20) are warnings, errors and critical messages
        if record.levelno > logging.INFO:
            raise AssertionError(self.formatter.format(record))

logging.getLogger().addHandler(FailOnWarningHandler())
