import sys
import logging
import threading
from typing import Any, Callable, Generic, Optional, TypeVar

from encore.interfaces import CommandProcessor, KeySource, LineDisplay
from .line_editor import LineEditor
from .mailbox import Mailbox
from .shutdown_flag import ShutdownFlag
from .processors import as_processor
from .output import stream

M = TypeVar('M')

class ConsoleError(RuntimeError):
    '''The background thread of a console failed, raised to the host when the console is closed'''

class _ConsoleThread(Generic[M]):
    '''Everything the background thread touches, kept apart from Console so the handle can be collected'''
    def __init__(
        self,
        processor_builder: Callable[[], Any],
        reaction: Callable[[Any], Optional[M]],
        key_source: KeySource,
        editor: LineEditor,
        mailbox: Mailbox[M],
        closed: ShutdownFlag,
    ) -> None:
        self.processor_builder = processor_builder
        self.reaction = reaction
        self.key_source = key_source
        self.editor = editor
        self.mailbox = mailbox
        self.closed = closed
        self.error: Optional[Exception] = None
        self.error_lock = threading.Lock()

    def take_error(self) -> Optional[Exception]:
        '''Returns the exception that stopped the thread (only the first time it is called)'''
        with self.error_lock:
            error, self.error = self.error, None
        return error

    def run(self) -> None:
        logging.debug('Console thread started')
        try:
            processor = as_processor(self.processor_builder())
            with self.key_source.opened():
                self.editor.refresh()
                self._loop(processor)
        except Exception as e:
            logging.info('Console thread failed: ' + repr(e))
            with self.error_lock:
                self.error = e
        finally:
            if self.closed.set():
                logging.info('Console closed by its thread')
            logging.debug('Console thread stopped')

    def _loop(self, processor: CommandProcessor) -> None:
        while not self.closed.is_set():
            event = self.key_source.read_event()
            if event is None:
                logging.info('Console input exhausted')
                return
            if self.closed.is_set():
                return
            line = self.editor.feed(event)
            if line is None:
                continue
            message = self.reaction(processor.parse(line))
            if message is None:
                logging.info('Console close requested by reaction to ' + repr(line))
                return
            if self.closed.is_set():
                return
            self.mailbox.send(message)
            self.editor.refresh()

class Console(Generic[M]):
    '''
    A handle to a line editing console that runs on its own thread alongside the host's main loop
    processor_builder: called once on the console thread to create the command processor
        (a CommandProcessor, a ConsoleArgumentParser or any function that takes a str)
    reaction: called on the console thread with each parsed line, returns a message for the host
        or None to close the console
    key_source: where key events come from, defaults to the terminal
    out: where the line being edited is drawn, defaults to stdout (pass the host's own stream so their writes share a lock)
    display: how the line being edited is drawn, defaults to what the key source makes for out
    prompt: shown in front of the line being edited
    '''
    def __init__(
        self,
        processor_builder: Callable[[], Any],
        reaction: Callable[[Any], Optional[M]],
        key_source: Optional[KeySource] = None,
        out: Optional[stream.Base] = None,
        display: Optional[LineDisplay] = None,
        prompt: str = '',
    ) -> None:
        assert callable(processor_builder)
        assert callable(reaction)
        if key_source is None:
            from encore.frontends.terminal import default_key_source
            key_source = default_key_source()
        if display is None:
            if out is None:
                out = stream.Std(sys.stdout)
            display = key_source.create_display(out, prompt)
        self._editor = LineEditor(display)
        self._mailbox: Mailbox[M] = Mailbox()
        self._closed = ShutdownFlag()
        self._worker = _ConsoleThread(
            processor_builder, reaction, key_source, self._editor, self._mailbox, self._closed)
        self._thread = threading.Thread(target=self._worker.run, name='encore-console', daemon=True)
        self._thread.start()

    def poll(self) -> Optional[M]:
        '''Get the oldest message from the console without blocking, or None if there are none'''
        return self._mailbox.receive()

    def is_open(self) -> bool:
        return not self._closed.is_set()

    def wait_until_closed(self, timeout: Optional[float] = None) -> bool:
        '''Block until the console closes or timeout seconds pass, returns if it is closed'''
        return self._closed.wait(timeout)

    def close(self) -> None:
        '''
        Close the console and wait for its thread to stop
        Safe to call more than once, messages already sent can still be polled afterwards
        Raises ConsoleError (once) if the console thread failed
        '''
        if self._closed.set():
            logging.info('Console closed by host')
        if threading.current_thread() is self._thread:
            # Closed from inside the reaction, the loop sees the flag when it returns
            return
        self._thread.join()
        error = self._worker.take_error()
        if error is not None:
            raise ConsoleError('console thread failed: ' + repr(error)) from error

    def __enter__(self) -> 'Console[M]':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __del__(self) -> None:
        thread = getattr(self, '_thread', None)
        if thread is None:
            return
        self._closed.set()
        self._mailbox.discard()
        if thread is not threading.current_thread():
            thread.join()
        error = self._worker.take_error()
        if error is not None:
            logging.error('Console thread failed and was never closed: ' + repr(error))
