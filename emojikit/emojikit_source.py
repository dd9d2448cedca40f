#!/usr/bin/env python3

# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from emojikit.common import configpaths
from emojikit.common import logging_helpers
from emojikit.common.const import DEFAULT_LOCALE
from emojikit.common.const import EmojiVersion
from emojikit.common.downloader import fetch_sources
from emojikit.common.downloader import Sources
from emojikit.common.exceptions import CountMismatch
from emojikit.common.exceptions import EmojiKitError
from emojikit.common.exceptions import SourceUnavailable
from emojikit.common.pipeline import build_dataset
from emojikit.common.storage import save_dataset

log = logging.getLogger('emojikit.source')


def parse_version(value: str) -> EmojiVersion:
    try:
        return EmojiVersion.from_string(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from error


def parse_annotation_file(value: str) -> tuple[str, Path]:
    locale, sep, filename = value.partition(':')
    if not sep or not locale or not filename:
        raise argparse.ArgumentTypeError(
            f'Expected LOCALE:FILE, got {value!r}')
    return locale, Path(filename)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except OSError as error:
        raise SourceUnavailable(f'Unable to read {path}: {error}') from error


def _read_optional(path: Path | None) -> str | None:
    if path is None:
        return None
    try:
        return _read_text(path)
    except SourceUnavailable as error:
        log.warning('%s', error)
        return None


def load_local_sources(args: argparse.Namespace) -> Sources:
    annotations: list[tuple[str, str]] = []
    for locale, path in args.annotations:
        document = _read_optional(path)
        if document is not None:
            annotations.append((locale, document))

    return Sources(emoji_test=_read_text(args.emoji_test),
                   annotations=annotations,
                   counts=_read_optional(args.counts))


def run(args: argparse.Namespace) -> Path:
    version: EmojiVersion = args.version
    if args.command == 'download':
        log.info('Downloading sources for emoji version %s',
                 version.version_identifier)
        sources = fetch_sources(version, args.locale or [DEFAULT_LOCALE])
    else:
        sources = load_local_sources(args)

    categories = build_dataset(sources.emoji_test,
                               sources.annotations,
                               sources.counts,
                               collect_variations=True)

    directory = args.path or configpaths.get_data_dir()
    return save_dataset(categories, version, directory)


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='emojikit-source',
        description='Builds categorized emoji datasets from Unicode and '
                    'CLDR sources')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print debug output')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Show only critical errors')
    parser.add_argument('--loglevels', type=str,
                        help='Set log levels, e.g. "emojikit=DEBUG"')
    parser.add_argument('--data-dir', type=Path,
                        help='Directory datasets are saved to')

    subparsers = parser.add_subparsers(required=True,
                                       metavar='commands',
                                       dest='command')

    subparser = subparsers.add_parser(
        'download',
        help='Download sources from unicode.org and build a dataset')
    subparser.add_argument('--version', type=parse_version,
                           default=EmojiVersion.V15,
                           help='Emoji version, e.g. 15.0')
    subparser.add_argument('--locale', action='append',
                           help='Locale of the keyword annotations, '
                                'can be given more than once')
    subparser.add_argument('path', type=Path, nargs='?',
                           help='Output directory')

    subparser = subparsers.add_parser(
        'parse',
        help='Build a dataset from local source files')
    subparser.add_argument('--emoji-test', type=Path, required=True,
                           help='emoji-test.txt file')
    subparser.add_argument('--annotations', type=parse_annotation_file,
                           action='append', default=[],
                           metavar='LOCALE:FILE',
                           help='CLDR annotation file, can be given more '
                                'than once')
    subparser.add_argument('--counts', type=Path,
                           help='emoji-counts.html file')
    subparser.add_argument('--version', type=parse_version,
                           default=EmojiVersion.V15,
                           help='Emoji version the sources belong to')
    subparser.add_argument('path', type=Path, nargs='?',
                           help='Output directory')

    return parser


def main(argv: list[str] | None = None) -> int:
    args = create_arg_parser().parse_args(argv)

    logging_helpers.init()
    if args.verbose:
        logging_helpers.set_verbose()
    else:
        logging_helpers.parseAndSetLogLevels('emojikit=INFO')
    if args.quiet:
        logging_helpers.set_quiet()
    if args.loglevels:
        logging_helpers.set_loglevels(args.loglevels)

    if args.data_dir is not None:
        configpaths.set_data_root(args.data_dir)

    try:
        path = run(args)
    except CountMismatch as error:
        log.error('Parsed emojis do not match the count file: %s', error)
        return 1
    except EmojiKitError as error:
        log.error('%s', error)
        return 1
    except OSError as error:
        log.error('Unable to save emojis: %s', error)
        return 1

    log.info('Saved emojis to %s', path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
