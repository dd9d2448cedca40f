# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import logging
from collections.abc import Iterable

from emojikit.common.annotations import AnnotationSourceT
from emojikit.common.annotations import merge_annotations
from emojikit.common.categories import normalize_groups
from emojikit.common.counts import parse_counts
from emojikit.common.counts import validate_counts
from emojikit.common.emoji_list import parse_emoji_list
from emojikit.common.structs import Emoji
from emojikit.common.structs import EmojiCategory
from emojikit.common.structs import EmojiGroup

log = logging.getLogger('emojikit.common.pipeline')


def build_annotations(sources: Iterable[AnnotationSourceT]
                      ) -> dict[str, Emoji]:
    annotations = merge_annotations(sources)
    if not annotations:
        log.warning('No annotations available, emojis have no keywords')
    return annotations


def parse_groups(emoji_test: str,
                 annotations: dict[str, Emoji],
                 counts_html: str | None = None) -> list[EmojiGroup]:
    '''
    Parses the emoji list and checks the group sizes against the count
    table if one is given.

    Raises CountMismatch if a group does not have the published size.
    '''
    groups = parse_emoji_list(emoji_test, annotations)

    if counts_html is None:
        log.info('No count table, skipping validation')
        return groups

    validate_counts(groups, parse_counts(counts_html))
    return groups


def build_dataset(emoji_test: str,
                  annotation_sources: Iterable[AnnotationSourceT] = (),
                  counts_html: str | None = None,
                  collect_variations: bool = True
                  ) -> list[EmojiCategory]:

    annotations = build_annotations(annotation_sources)
    groups = parse_groups(emoji_test, annotations, counts_html)
    categories = normalize_groups(groups, collect_variations)

    log.info('Built %s categories with %s emojis and %s variations',
             len(categories),
             sum(len(category.emojis) for category in categories),
             sum(len(variants)
                 for category in categories
                 for variants in category.variations.values()))
    return categories
