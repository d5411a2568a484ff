# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Leveled logging with RFC 5424 severities

__all__ = (
    'EMERGENCY', 'ALERT', 'CRITICAL', 'ERROR',
    'WARNING', 'NOTICE', 'INFO', 'DEBUG',
    'Logger',
    'get_log_level',
    'init',
    'init_file',
    'init_from_config',
    'noisy_init',
    'logger',
    'current_level',
    'emergency', 'emergencyf',
    'alert', 'alertf',
    'critical', 'criticalf',
    'error', 'errorf',
    'warning', 'warningf',
    'notice', 'noticef',
    'info', 'infof',
    'debug', 'debugf',
    'dbg',
)

import os
import sys
import time
import inspect
import threading

from .messages import ELOGLEVEL, SimpleSite

# Lower value means more severe
(EMERGENCY, ALERT, CRITICAL, ERROR,
 WARNING, NOTICE, INFO, DEBUG) = range(8)

level_names = ('EMERGENCY', 'ALERT', 'CRITICAL', 'ERROR',
               'WARNING', 'NOTICE', 'INFO', 'DEBUG')

# Accepted spellings of each level: its number "0" to "7", or a name
level_aliases = {str(level): level for level in range(len(level_names))}
level_aliases.update({
    'Emergency': EMERGENCY,
    'Alert': ALERT,
    'Critical': CRITICAL,
    'Error': ERROR,
    'Warning': WARNING,
    'Notice': NOTICE,
    'Informational': INFO,
    'Info': INFO,
    'Debug': DEBUG,
})

def get_log_level(name, site=None):
    '''Translate a level given as "0" to "7" or as a severity name,
    such as "Warning", to its numeric value. An unknown name raises
    ELOGLEVEL, reported at site if given.'''
    name = str(name)
    if name not in level_aliases:
        raise ELOGLEVEL(site or SimpleSite('<log level>'), name)
    return level_aliases[name]

class _Discard(object):
    def write(self, s):
        pass
    def flush(self):
        pass

def _caller_frame(depth):
    '''The frame depth levels above the function calling this one'''
    frame = inspect.currentframe().f_back
    for _ in range(depth):
        frame = frame.f_back
    return frame

class Logger(object):
    '''Writes messages with a severity at most 'level' to the stream
    'out'. With 'caller' set, each line also names the file and line
    that issued it.

    Besides log() and logf(), there is one method pair per level, e.g.
    warning(*args), which joins args with spaces, and warningf(fmt,
    *args), which expands fmt with the % operator.'''
    def __init__(self, out, level=ERROR, caller=False, owns_out=False):
        self.out = out
        self.level = level
        self.caller = caller
        # True if out was opened by us and should be closed with us
        self.owns_out = owns_out

    def close(self):
        if self.owns_out:
            self.out.close()
            self.owns_out = False

    def enabled(self, level):
        return level <= self.level

    def _log(self, level, msg, stacklevel):
        '''stacklevel is the number of frames between this method and
        the code that issued the message'''
        if not self.enabled(level):
            return
        prefix = "%s %-9s" % (time.strftime('%Y/%m/%d %H:%M:%S'),
                              level_names[level])
        if self.caller:
            frame = _caller_frame(stacklevel + 1)
            prefix += " [%s:%d]" % (os.path.basename(frame.f_code.co_filename),
                                    frame.f_lineno)
        self.out.write("%s %s\n" % (prefix, msg))
        self.out.flush()

    def log(self, level, *args):
        self._log(level, ' '.join(map(str, args)), 1)
    def logf(self, level, fmt, *args):
        self._log(level, fmt % args, 1)

def level_methods(level, name):
    def log(self, *args):
        self._log(level, ' '.join(map(str, args)), 1)
    def logf(self, fmt, *args):
        self._log(level, fmt % args, 1)
    log.__name__ = name
    logf.__name__ = name + 'f'
    return (log, logf)

for (level, name) in enumerate(level_names):
    for method in level_methods(level, name.lower()):
        method.__qualname__ = 'Logger.' + method.__name__
        setattr(Logger, method.__name__, method)

# The process-wide logger used by the module level functions. Replace
# it with init(), init_file() or init_from_config(); until then,
# everything is discarded. The object returned by logger() is a
# snapshot; it is closed when the default logger is replaced.
_lock = threading.Lock()
_logger = Logger(_Discard())

def init(out, level=ERROR, caller=False):
    '''(Re)initialize the default logger to write to the stream out.
    A log file opened by init_file() is closed.

    Messages are written while a module lock is held, so the write
    method of out must not log through this module.'''
    _replace(Logger(out, level, caller))

def init_file(filename, level=ERROR, caller=False):
    '''(Re)initialize the default logger to append to a file. Raises
    OSError if the file cannot be opened.'''
    f = open(filename, 'a')
    _replace(Logger(f, level, caller, owns_out=True))

def noisy_init():
    init(sys.stdout, DEBUG, True)

def init_from_config(cfg, section='log'):
    '''Initialize the default logger from the options 'level', 'file'
    and 'caller' of a section in a gadget.config.Config'''
    level = get_log_level(cfg.get_default(section, 'level', 'Error'),
                          SimpleSite(cfg.name))
    caller = (cfg.bool(section, 'caller')
              if 'caller' in cfg.sections.get(section, {}) else False)
    filename = cfg.get_default(section, 'file', None)
    if filename:
        init_file(filename, level, caller)
    else:
        init(sys.stderr, level, caller)

def _replace(new):
    global _logger
    with _lock:
        old = _logger
        _logger = new
        # no message can be in flight to old while we hold the lock
        old.close()

def logger():
    with _lock:
        return _logger

def current_level():
    with _lock:
        return _logger.level

def _emit(level, msg):
    with _lock:
        # frames: _emit, the module level function, its caller
        _logger._log(level, msg, 2)

def level_functions(level, name):
    def log(*args):
        _emit(level, ' '.join(map(str, args)))
    def logf(fmt, *args):
        _emit(level, fmt % args)
    log.__name__ = log.__qualname__ = name
    logf.__name__ = logf.__qualname__ = name + 'f'
    return (log, logf)

for (level, name) in enumerate(level_names):
    for function in level_functions(level, name.lower()):
        globals()[function.__name__] = function

del level, name, method, function

def dbg(*args):
    sys.stderr.write("%s\n" % (" ".join(map(str, args))))
