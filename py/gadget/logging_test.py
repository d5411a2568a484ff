# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

import io
import inspect
import os
import re
import sys
import tempfile
import unittest

from gadget import config, logging
from gadget.messages import ELOGLEVEL, ENOKEY, LineSite, report

names = ['emergency', 'alert', 'critical', 'error',
         'warning', 'notice', 'info', 'debug']

class LoggingTestCase(unittest.TestCase):
    '''Restores the default logger after each test'''
    def setUp(self):
        self.orig = logging._logger
        self.out = io.StringIO()

    def tearDown(self):
        current = logging._logger
        logging._logger = self.orig
        if current is not self.orig:
            current.close()

    def lines(self):
        return self.out.getvalue().splitlines()

class TestLevels(unittest.TestCase):
    def test_get_log_level(self):
        texts = ['Emergency', 'Alert', 'Critical', 'Error', 'Warning',
                 'Notice', 'Info', 'Debug']
        for (i, text) in enumerate(texts):
            self.assertEqual(logging.get_log_level(str(i)), i)
            self.assertEqual(logging.get_log_level(text), i)
        self.assertEqual(logging.get_log_level('Informational'),
                         logging.INFO)
        for bad in ['', '8', '-1', 'debug', 'Verbose', '²', '07', '٣', ' 3']:
            with self.assertRaises(ELOGLEVEL):
                logging.get_log_level(bad)

    def test_order(self):
        self.assertLess(logging.EMERGENCY, logging.ERROR)
        self.assertLess(logging.ERROR, logging.DEBUG)

class TestModule(LoggingTestCase):
    def test_package(self):
        self.assertIsNotNone(logging.logger())
        # None of these may fail, even when nothing is written
        for name in names:
            getattr(logging, name)('test')
            getattr(logging, name + 'f')('test %d', 1)

    def test_threshold(self):
        logging.init(self.out, logging.WARNING)
        self.assertEqual(logging.current_level(), logging.WARNING)
        for name in names:
            getattr(logging, name)('plain', name)
            getattr(logging, name + 'f')('formatted %s', name)
        lines = self.lines()
        self.assertEqual(len(lines), 10)
        for name in names[:5]:
            self.assertTrue(any(l.endswith('plain ' + name) for l in lines))
            self.assertTrue(any(l.endswith('formatted ' + name)
                                for l in lines))
        self.assertFalse(any('notice' in l for l in lines))

    def test_format(self):
        logging.init(self.out, logging.DEBUG)
        logging.info('a', 1, None)
        [line] = self.lines()
        self.assertRegex(
            line, r'^\d{4}/\d\d/\d\d \d\d:\d\d:\d\d INFO      a 1 None$')

    def test_caller(self):
        logging.init(self.out, logging.DEBUG, True)
        logging.debug('here')
        logging.noticef('%s', 'there')
        lines = self.lines()
        self.assertEqual(len(lines), 2)
        for l in lines:
            self.assertIn('[logging_test.py:', l)
        self.assertTrue(re.search(r'DEBUG     \[logging_test\.py:\d+\] here$',
                                  lines[0]))

    def test_logger(self):
        first = logging.logger()
        logging.init(self.out, logging.DEBUG, True)
        second = logging.logger()
        self.assertIsNot(first, second)
        self.assertIs(second.out, self.out)

    def test_init_file(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, 'test.log')
            logging.init_file(path, logging.DEBUG)
            f = logging.logger().out
            logging.info('to file')
            logging.init(self.out)
            self.assertTrue(f.closed)
            with open(path) as f:
                self.assertIn('to file', f.read())
            with self.assertRaises(OSError):
                logging.init_file(os.path.join(d, 'no', 'such', 'file'))
        with self.assertRaises(OSError):
            logging.init_file('')

    def test_replace_closes_snapshot(self):
        with tempfile.TemporaryDirectory() as d:
            logging.init_file(os.path.join(d, 'a.log'))
            snapshot = logging.logger()
            logging.init(self.out)
            self.assertTrue(snapshot.out.closed)
            self.assertFalse(snapshot.owns_out)
            self.assertIsNot(logging.logger(), snapshot)

    def test_write_under_lock(self):
        # a stream must not log from write(); the lock is not reentrant
        held = []
        class Stream(io.StringIO):
            def write(self, s):
                held.append(logging._lock.locked())
                return io.StringIO.write(self, s)
        logging.init(Stream(), logging.DEBUG)
        logging.info('x')
        self.assertEqual(held, [True])
        self.assertFalse(logging._lock.locked())

    def test_noisy_init(self):
        logging.noisy_init()
        self.assertIs(logging.logger().out, sys.stdout)
        self.assertEqual(logging.current_level(), logging.DEBUG)
        self.assertTrue(logging.logger().caller)

    def test_report(self):
        logging.init(self.out)
        report(ENOKEY(LineSite('x.ini', 4), 'k', 's'))
        [line] = self.lines()
        self.assertIn("ERROR     x.ini:4 ENOKEY: key 'k' not found"
                      " in section 's'", line)

class TestLogger(LoggingTestCase):
    def test_methods(self):
        log = logging.Logger(self.out, logging.NOTICE)
        for name in names:
            getattr(log, name)('plain')
            getattr(log, name + 'f')('%s-%d', 'fmt', 2)
        log.log(logging.INFO, 'hidden')
        log.logf(logging.ALERT, '%s', 'shown')
        lines = self.lines()
        self.assertEqual(len(lines), 13)
        self.assertTrue(lines[0].split()[2:] == ['EMERGENCY', 'plain'])
        self.assertTrue(lines[-1].endswith('ALERT     shown'))

    def test_enabled(self):
        log = logging.Logger(self.out, logging.ERROR)
        self.assertTrue(log.enabled(logging.CRITICAL))
        self.assertTrue(log.enabled(logging.ERROR))
        self.assertFalse(log.enabled(logging.WARNING))

    def test_close(self):
        log = logging.Logger(self.out)
        log.close()
        self.assertFalse(self.out.closed)
        log = logging.Logger(self.out, owns_out=True)
        log.close()
        self.assertTrue(self.out.closed)

    def test_caller(self):
        log = logging.Logger(self.out, logging.DEBUG, caller=True)
        log.warning('w')
        [line] = self.lines()
        self.assertIn('[logging_test.py:', line)

    def test_caller_line(self):
        log = logging.Logger(self.out, logging.DEBUG, caller=True)
        line = inspect.currentframe().f_lineno + 1
        log.errorf('%d', 1)
        logging.init(self.out, logging.DEBUG, True)
        line2 = inspect.currentframe().f_lineno + 1
        logging.error('2')
        lines = self.lines()
        self.assertIn('[logging_test.py:%d] 1' % line, lines[0])
        self.assertIn('[logging_test.py:%d] 2' % line2, lines[1])

    def test_level_names(self):
        for name in names:
            for suffix in ['', 'f']:
                self.assertEqual(getattr(logging, name + suffix).__name__,
                                 name + suffix)
                self.assertEqual(
                    getattr(logging.Logger, name + suffix).__qualname__,
                    'Logger.' + name + suffix)

class TestInitFromConfig(LoggingTestCase):
    def test_level_and_file(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, 'out.log')
            cfg = config.load(io.StringIO(
                '[log]\nlevel = Notice\nfile = %s\ncaller = true\n' % path))
            logging.init_from_config(cfg)
            self.assertEqual(logging.current_level(), logging.NOTICE)
            self.assertTrue(logging.logger().caller)
            logging.notice('noted')
            logging.info('dropped')
            logging.init(self.out)
            with open(path) as f:
                content = f.read()
            self.assertIn('noted', content)
            self.assertNotIn('dropped', content)

    def test_defaults(self):
        cfg = config.load(io.StringIO('[other]\nx = 1\n'))
        logging.init_from_config(cfg)
        self.assertEqual(logging.current_level(), logging.ERROR)
        self.assertIs(logging.logger().out, sys.stderr)
        self.assertFalse(logging.logger().caller)

    def test_bad_level(self):
        cfg = config.load(io.StringIO('[log]\nlevel = Loud\n'),
                          filename='app.ini')
        with self.assertRaises(ELOGLEVEL) as cm:
            logging.init_from_config(cfg)
        self.assertEqual(cm.exception.site.loc(), 'app.ini')
        self.assertTrue(str(cm.exception).startswith('app.ini: '))
        with self.assertRaises(ELOGLEVEL) as cm:
            logging.get_log_level('Loud')
        self.assertEqual(cm.exception.site.loc(), '<log level>')
