# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER = 'emojikit'
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)-35s %(message)s'
DATE_FORMAT = '%x %H:%M:%S'


def parseLogLevel(arg: str) -> int:
    '''
    Either numeric value or level name from logging module
    '''
    if arg.isdigit():
        return int(arg)
    if arg.isupper() and hasattr(logging, arg):
        return getattr(logging, arg)
    print('%s is not a valid loglevel' % repr(arg), file=sys.stderr)
    return 0


def parseLogTarget(arg: str) -> str:
    '''
    [emojikit.]c.x.y  ->  emojikit.c.x.y
    .other_logger     ->  other_logger
    <None>            ->  emojikit
    '''
    arg = arg.lower()
    if not arg:
        return ROOT_LOGGER
    if arg.startswith('.'):
        return arg[1:]
    if arg.startswith(ROOT_LOGGER):
        return arg
    return f'{ROOT_LOGGER}.{arg}'


def parseAndSetLogLevels(arg: str) -> None:
    '''
    [=]LOGLEVEL        ->  emojikit=LOGLEVEL
    emojikit=LOGLEVEL  ->  emojikit=LOGLEVEL
    .other=10          ->  other=10
    c.x.y=c.z=20       ->  emojikit.c.x.y=20
                           emojikit.c.z=20
    emojikit=10,c.x=20 ->  emojikit=10
                           emojikit.c.x=20
    '''
    for directive in arg.split(','):
        directive = directive.strip()
        if not directive:
            continue
        if '=' not in directive:
            directive = '=' + directive
        targets, level = directive.rsplit('=', 1)
        level = parseLogLevel(level.strip())
        for target in targets.split('='):
            target = parseLogTarget(target.strip())
            if target:
                logging.getLogger(target).setLevel(level)


ESCAPE = '\x1b[%sm'
RESET = ESCAPE % '0'
NAME_COLOR = ESCAPE % '36'

# Level numbers to ANSI SGR codes, levels in between take the next lower one
LEVEL_COLORS = {
    logging.DEBUG: ESCAPE % '34',
    logging.INFO: ESCAPE % '32',
    logging.WARNING: ESCAPE % '33',
    logging.ERROR: ESCAPE % '31',
    logging.CRITICAL: ESCAPE % '31;1',
}


def get_level_color(levelno: int) -> str:
    color = ''
    for level, level_color in sorted(LEVEL_COLORS.items()):
        if levelno >= level:
            color = level_color
    return color


class FancyFormatter(logging.Formatter):
    '''
    Shortens the level name to its initial and aligns logger names,
    optionally colored for terminals
    '''

    def __init__(self,
                 fmt: str | None = None,
                 datefmt: str | None = None,
                 use_color: bool = False) -> None:
        logging.Formatter.__init__(self, fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers get the record unchanged
        record = logging.makeLogRecord(record.__dict__)
        levelname = '(%s)' % record.levelname[:1]

        if self.use_color:
            color = get_level_color(record.levelno)
            record.levelname = f'{color}{levelname}{RESET}'
            record.name = '%-25s' % f'{NAME_COLOR}{record.name}{RESET}'
        else:
            record.levelname = levelname
            record.name = '%-25s|' % record.name

        return logging.Formatter.format(self, record)


def init() -> None:
    '''
    Initialize the logging system
    '''
    use_color = False
    if os.name != 'nt':
        use_color = sys.stderr.isatty()

    _stream_handler.setFormatter(
        FancyFormatter(LOG_FORMAT, DATE_FORMAT, use_color))

    root_log = logging.getLogger(ROOT_LOGGER)
    root_log.setLevel(logging.WARNING)
    if _stream_handler not in root_log.handlers:
        root_log.addHandler(_stream_handler)
    root_log.propagate = False

    root_log = logging.getLogger('urllib3')
    root_log.setLevel(logging.WARNING)
    if _stream_handler not in root_log.handlers:
        root_log.addHandler(_stream_handler)
    root_log.propagate = False

    if os.environ.get('EMOJIKIT_DEBUG', False):
        set_verbose()


def set_loglevels(loglevels_string: str) -> None:
    parseAndSetLogLevels(loglevels_string)


def set_verbose() -> None:
    parseAndSetLogLevels('emojikit=DEBUG')
    parseAndSetLogLevels('.urllib3=INFO')


def set_quiet() -> None:
    parseAndSetLogLevels('emojikit=CRITICAL')
    parseAndSetLogLevels('.urllib3=CRITICAL')


_stream_handler = logging.StreamHandler()
