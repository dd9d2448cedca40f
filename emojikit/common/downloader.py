# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field

import requests

from emojikit import __version__
from emojikit.common.const import CLDR_ANNOTATIONS_DERIVED_URL
from emojikit.common.const import CLDR_ANNOTATIONS_URL
from emojikit.common.const import DEFAULT_LOCALE
from emojikit.common.const import EmojiVersion
from emojikit.common.const import REQUEST_TIMEOUT
from emojikit.common.exceptions import SourceUnavailable

log = logging.getLogger('emojikit.common.downloader')

HEADERS = {'User-Agent': f'EmojiKit/{__version__}'}


@dataclass(frozen=True)
class Sources:
    emoji_test: str
    annotations: list[tuple[str, str]] = field(default_factory=list)
    counts: str | None = None


def fetch_text(url: str,
               timeout: float = REQUEST_TIMEOUT,
               session: requests.Session | None = None) -> str:

    log.info('Downloading %s', url)
    getter = session or requests
    try:
        response = getter.get(url, headers=HEADERS, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as error:
        raise SourceUnavailable(f'Unable to download {url}: {error}') from error

    if response.status_code != 200:
        raise SourceUnavailable(
            f'Unable to download {url}: HTTP {response.status_code}')

    response.encoding = 'utf-8'
    return response.text


def _fetch_optional(url: str, session: requests.Session) -> str | None:
    try:
        return fetch_text(url, session=session)
    except SourceUnavailable as error:
        log.warning('%s', error)
        return None


def fetch_sources(version: EmojiVersion,
                  locales: Iterable[str] = (DEFAULT_LOCALE,)) -> Sources:
    '''
    Downloads everything the pipeline needs for a version. Only the emoji
    list is required, missing annotations and counts are skipped.
    '''
    with requests.Session() as session:
        emoji_test = fetch_text(version.emoji_test_url, session=session)

        annotations: list[tuple[str, str]] = []
        for locale in locales:
            for template in (CLDR_ANNOTATIONS_URL,
                             CLDR_ANNOTATIONS_DERIVED_URL):
                document = _fetch_optional(template.format(locale=locale),
                                           session)
                if document is not None:
                    annotations.append((locale, document))

        counts = _fetch_optional(version.emoji_counts_url, session)

    return Sources(emoji_test=emoji_test,
                   annotations=annotations,
                   counts=counts)
