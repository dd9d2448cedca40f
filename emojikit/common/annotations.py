# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

'''
Reads keyword annotations from CLDR annotation documents, see
<https://unicode.org/reports/tr35/tr35-general.html#Annotations>
'''

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from collections.abc import Iterator

from emojikit.common.const import DEFAULT_LOCALE
from emojikit.common.const import KEYWORD_SEPARATOR
from emojikit.common.const import TTS_ANNOTATION_TYPE
from emojikit.common.structs import Emoji
from emojikit.common.structs import LocalizedKeywordsT

log = logging.getLogger('emojikit.common.annotations')

AnnotationSourceT = tuple[str, str | bytes]


def split_keywords(text: str) -> tuple[str, ...]:
    keywords = (keyword.strip() for keyword in text.split(KEYWORD_SEPARATOR))
    return tuple(keyword for keyword in keywords if keyword)


def iter_annotations(document: str | bytes
                     ) -> Iterator[tuple[str, tuple[str, ...]]]:
    '''
    Yields (emoji, keywords) for every keyword annotation of a document,
    text-to-speech names are left out.

    Raises ET.ParseError if the document is not well formed.
    '''
    if isinstance(document, str):
        document = document.encode('utf-8')

    root = ET.fromstring(document)
    for element in root.iter('annotation'):
        if element.get('type') == TTS_ANNOTATION_TYPE:
            continue

        value = element.get('cp')
        if not value:
            continue

        yield value, split_keywords((element.text or '').strip())


def parse_annotations(document: str | bytes,
                      locale: str = DEFAULT_LOCALE
                      ) -> dict[str, Emoji]:
    '''
    Returns emoji value -> Emoji, the last annotation wins if a value is
    annotated more than once. A malformed document gives an empty result.
    '''
    try:
        annotations = list(iter_annotations(document))
    except ET.ParseError as error:
        log.warning('Unable to parse annotations for locale %s: %s',
                    locale, error)
        return {}

    emojis = {
        value: Emoji(value=value,
                     keywords=keywords,
                     localized_keywords={locale: keywords})
        for value, keywords in annotations
    }
    log.info('Found %s annotations for locale %s', len(emojis), locale)
    return emojis


def merge_annotations(sources: Iterable[AnnotationSourceT]
                      ) -> dict[str, Emoji]:
    '''
    Merges (locale, document) pairs into one enrichment map.

    Documents of the same locale do not overwrite what an earlier
    document already provided. Keywords of all locales end up in
    Emoji.localized_keywords, Emoji.keywords are those of the first
    locale that annotated the emoji.
    '''
    per_locale: dict[str, dict[str, tuple[str, ...]]] = {}
    for locale, document in sources:
        keywords_map = per_locale.setdefault(locale, {})
        for value, emoji in parse_annotations(document, locale).items():
            keywords_map.setdefault(value, emoji.keywords)

    localized: dict[str, LocalizedKeywordsT] = {}
    for locale, keywords_map in per_locale.items():
        for value, keywords in keywords_map.items():
            localized.setdefault(value, {})[locale] = keywords

    return {
        value: Emoji(value=value,
                     keywords=next(iter(keywords.values())),
                     localized_keywords=keywords)
        for value, keywords in localized.items()
    }
