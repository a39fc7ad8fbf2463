import gc
import threading
import unittest
from unittest import mock

import encore.interfaces
from encore.core import (
    Console,
    ConsoleError,
    ConsoleArgumentParser,
    ScriptedKeySource,
    KeyEvent,
)
from encore.core.key import UP, LEFT, BACKSPACE
from encore.core.output import NullDisplay, stream

TIMEOUT = 5

def identity():
    return lambda line: line

def shout_until_quit(line):
    if line == 'quit':
        return None
    else:
        return line.upper()

def poll_all(console):
    result = []
    message = console.poll()
    while message is not None:
        result.append(message)
        message = console.poll()
    return result

class TestConsoleScenarios(unittest.TestCase):
    def test_shout_then_quit(self):
        source = ScriptedKeySource(KeyEvent.from_text('abc\nquit\n'), end=False)
        console = Console(identity, shout_until_quit, key_source=source)
        self.assertTrue(console.wait_until_closed(TIMEOUT))
        self.assertFalse(console.is_open())
        self.assertEqual(console.poll(), 'ABC')
        self.assertIsNone(console.poll())
        console.close()

    def test_messages_keep_order(self):
        source = ScriptedKeySource(KeyEvent.from_text('l1\nl2\nl3\n'))
        with Console(identity, shout_until_quit, key_source=source) as console:
            self.assertTrue(console.wait_until_closed(TIMEOUT))
        self.assertEqual(poll_all(console), ['L1', 'L2', 'L3'])

    def test_lines_are_edited_before_processing(self):
        events = KeyEvent.from_text('abd') + [BACKSPACE] + KeyEvent.from_text('c\n') + [UP, LEFT]
        events += KeyEvent.from_text('x\n')
        source = ScriptedKeySource(events)
        with Console(identity, shout_until_quit, key_source=source) as console:
            self.assertTrue(console.wait_until_closed(TIMEOUT))
        self.assertEqual(poll_all(console), ['ABC', 'ABXC'])

    def test_lines_are_trimmed(self):
        source = ScriptedKeySource(KeyEvent.from_text('  hi  \n'))
        with Console(identity, shout_until_quit, key_source=source) as console:
            console.wait_until_closed(TIMEOUT)
        self.assertEqual(poll_all(console), ['HI'])

    def test_empty_lines_still_reach_the_processor(self):
        seen = []
        def builder():
            return lambda line: seen.append(line) or line
        source = ScriptedKeySource(KeyEvent.from_text('\n  \nx\n'))
        with Console(builder, lambda parsed: 'got ' + parsed, key_source=source) as console:
            console.wait_until_closed(TIMEOUT)
        self.assertEqual(seen, ['', '', 'x'])
        self.assertEqual(poll_all(console), ['got ', 'got ', 'got x'])

    def test_argument_parser_processor(self):
        def builder():
            parser = ConsoleArgumentParser(description='This is an example app')
            parser.add_argument('INPUT', help='The input string')
            return parser
        def reaction(result):
            if result.ok():
                return ('input', result.matches.INPUT)
            else:
                return ('error', result.error)
        source = ScriptedKeySource(KeyEvent.from_text('hello\n\n'))
        with Console(builder, reaction, key_source=source) as console:
            console.wait_until_closed(TIMEOUT)
        messages = poll_all(console)
        self.assertEqual(len(messages), 2)
        self.assertEqual(messages[0], ('input', 'hello'))
        self.assertEqual(messages[1][0], 'error')
        self.assertIn('usage: encore', messages[1][1])

class TestConsoleShutdown(unittest.TestCase):
    def test_end_of_input_closes(self):
        source = ScriptedKeySource(KeyEvent.from_text('abc\n'))
        console = Console(identity, shout_until_quit, key_source=source)
        self.assertTrue(console.wait_until_closed(TIMEOUT))
        self.assertTrue(source.exited.wait(TIMEOUT))
        self.assertEqual(poll_all(console), ['ABC'])
        console.close()

    def test_reaction_returning_none_closes(self):
        source = ScriptedKeySource(KeyEvent.from_text('quit\nmore\n'), end=False)
        console = Console(identity, shout_until_quit, key_source=source)
        self.assertTrue(console.wait_until_closed(TIMEOUT))
        console.close()
        self.assertIsNone(console.poll())

    def test_host_close_stops_waiting_console(self):
        source = ScriptedKeySource(end=False)
        console = Console(identity, shout_until_quit, key_source=source)
        self.assertTrue(source.entered.wait(TIMEOUT))
        self.assertTrue(console.is_open())
        console.close()
        self.assertFalse(console.is_open())
        self.assertTrue(source.exited.is_set())

    def test_close_twice_is_fine(self):
        source = ScriptedKeySource(end=False)
        console = Console(identity, shout_until_quit, key_source=source)
        console.close()
        console.close()
        self.assertFalse(console.is_open())

    def test_close_after_console_stopped_itself(self):
        source = ScriptedKeySource(KeyEvent.from_text('quit\n'))
        console = Console(identity, shout_until_quit, key_source=source)
        self.assertTrue(console.wait_until_closed(TIMEOUT))
        console.close()
        console.close()

    def test_messages_survive_close(self):
        source = ScriptedKeySource(KeyEvent.from_text('a\nb\n'), end=False)
        console = Console(identity, shout_until_quit, key_source=source)
        source.feed_text('quit\n')
        self.assertTrue(console.wait_until_closed(TIMEOUT))
        console.close()
        self.assertEqual(poll_all(console), ['A', 'B'])

    def test_pending_events_ignored_after_close(self):
        reached = threading.Event()
        release = threading.Event()
        seen = []
        def reaction(line):
            seen.append(line)
            if line == 'first':
                reached.set()
                release.wait(TIMEOUT)
            return line
        source = ScriptedKeySource(KeyEvent.from_text('first\nsecond\n'), end=False)
        console = Console(identity, reaction, key_source=source)
        self.assertTrue(reached.wait(TIMEOUT))
        closer = threading.Thread(target=console.close)
        closer.start()
        self.assertTrue(console.wait_until_closed(TIMEOUT))
        release.set()
        closer.join(TIMEOUT)
        self.assertFalse(closer.is_alive())
        self.assertEqual(seen, ['first'])
        self.assertIsNone(console.poll())

    def test_close_from_inside_reaction(self):
        holder = []
        def reaction(line):
            holder[0].close()
            return line
        source = ScriptedKeySource(end=False)
        console = Console(identity, reaction, key_source=source)
        holder.append(console)
        source.feed_text('a\nb\n')
        self.assertTrue(console.wait_until_closed(TIMEOUT))
        self.assertTrue(source.exited.wait(TIMEOUT))
        console.close()
        self.assertIsNone(console.poll())

    def test_context_manager_closes(self):
        source = ScriptedKeySource(end=False)
        with Console(identity, shout_until_quit, key_source=source) as console:
            self.assertTrue(console.is_open())
        self.assertFalse(console.is_open())
        self.assertTrue(source.exited.is_set())

    def test_discarding_handle_stops_thread(self):
        source = ScriptedKeySource(end=False)
        console = Console(identity, shout_until_quit, key_source=source)
        self.assertTrue(source.entered.wait(TIMEOUT))
        del console
        gc.collect()
        self.assertTrue(source.exited.is_set())

class TestConsoleFailures(unittest.TestCase):
    def test_reaction_error_raised_on_close(self):
        def reaction(line):
            raise ValueError('bad line ' + line)
        source = ScriptedKeySource(KeyEvent.from_text('x\n'), end=False)
        console = Console(identity, reaction, key_source=source)
        self.assertTrue(console.wait_until_closed(TIMEOUT))
        with self.assertRaises(ConsoleError) as cm:
            console.close()
        self.assertIsInstance(cm.exception.__cause__, ValueError)
        console.close() # only raised once

    def test_builder_error_raised_on_close(self):
        def builder():
            raise KeyError('no processor')
        console = Console(builder, shout_until_quit, key_source=ScriptedKeySource(end=False))
        self.assertTrue(console.wait_until_closed(TIMEOUT))
        with self.assertRaises(ConsoleError) as cm:
            console.close()
        self.assertIsInstance(cm.exception.__cause__, KeyError)

    def test_unusable_processor_raised_on_close(self):
        console = Console(lambda: 42, shout_until_quit, key_source=ScriptedKeySource(end=False))
        self.assertTrue(console.wait_until_closed(TIMEOUT))
        with self.assertRaises(ConsoleError) as cm:
            console.close()
        self.assertIsInstance(cm.exception.__cause__, TypeError)

    def test_console_error_is_runtime_error(self):
        self.assertTrue(issubclass(ConsoleError, RuntimeError))

class TestConsoleThreading(unittest.TestCase):
    def test_builder_and_reaction_run_on_console_thread(self):
        threads = []
        def builder():
            threads.append(threading.current_thread())
            return lambda line: line
        def reaction(line):
            threads.append(threading.current_thread())
            return line
        source = ScriptedKeySource(KeyEvent.from_text('a\n'))
        with Console(builder, reaction, key_source=source) as console:
            console.wait_until_closed(TIMEOUT)
        self.assertEqual(len(threads), 2)
        self.assertIs(threads[0], threads[1])
        self.assertIsNot(threads[0], threading.current_thread())

    def test_builder_called_once(self):
        builder = mock.Mock(return_value=lambda line: line)
        source = ScriptedKeySource(KeyEvent.from_text('a\nb\nc\n'))
        with Console(builder, shout_until_quit, key_source=source) as console:
            console.wait_until_closed(TIMEOUT)
        builder.assert_called_once_with()

    def test_poll_does_not_block(self):
        source = ScriptedKeySource(end=False)
        with Console(identity, shout_until_quit, key_source=source) as console:
            self.assertIsNone(console.poll())
            source.feed_text('late\n')
            message = None
            for _ in range(TIMEOUT * 100):
                message = console.poll()
                if message is not None:
                    break
                console.wait_until_closed(0.01)
            self.assertEqual(message, 'LATE')

class TestConsoleDisplay(unittest.TestCase):
    def test_display_is_used(self):
        display = mock.Mock(spec=encore.interfaces.LineDisplay)
        source = ScriptedKeySource(KeyEvent.from_text('ab\n'))
        with Console(identity, shout_until_quit, key_source=source, display=display) as console:
            console.wait_until_closed(TIMEOUT)
        display.redraw.assert_any_call('', 0)
        display.redraw.assert_any_call('ab', 2)
        display.newline.assert_called_once_with()

    def test_prompt_redrawn_after_each_line(self):
        display = mock.Mock(spec=encore.interfaces.LineDisplay)
        source = ScriptedKeySource(KeyEvent.from_text('ab\n'))
        with Console(identity, shout_until_quit, key_source=source, display=display) as console:
            console.wait_until_closed(TIMEOUT)
        self.assertEqual(display.mock_calls[-2:], [mock.call.newline(), mock.call.redraw('', 0)])

    def test_key_source_makes_display_for_host_stream(self):
        out = stream.String()
        source = ScriptedKeySource(end=False)
        display = NullDisplay()
        with mock.patch.object(source, 'create_display', return_value=display) as create_display:
            with Console(identity, shout_until_quit, key_source=source, out=out, prompt='> ') as console:
                self.assertIs(console._editor.display, display)
        create_display.assert_called_once_with(out, '> ')

    def test_scripted_source_gets_null_display(self):
        source = ScriptedKeySource(end=False)
        with Console(identity, shout_until_quit, key_source=source) as console:
            self.assertIsInstance(console._editor.display, NullDisplay)
