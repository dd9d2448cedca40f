# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import logging
from collections.abc import Iterable

from emojikit.common.codepoints import is_neutral
from emojikit.common.codepoints import unqualified_form
from emojikit.common.codepoints import unqualified_neutral_form
from emojikit.common.const import Category
from emojikit.common.const import GROUP_PRECEDENCE
from emojikit.common.const import UnicodeGroup
from emojikit.common.structs import Emoji
from emojikit.common.structs import EmojiCategory
from emojikit.common.structs import EmojiGroup

log = logging.getLogger('emojikit.common.categories')

EmojisT = dict[str, Emoji]
VariationsT = dict[str, list[Emoji]]


def split_variations(group: EmojiGroup,
                     collect_variations: bool = False
                     ) -> tuple[EmojisT, VariationsT]:
    '''
    Splits a group into neutral emojis and skin tone variations, the
    variations are keyed by the unqualified neutral form of the emoji.
    Without collect_variations skin toned emojis are dropped.
    '''
    emojis: EmojisT = {}
    variations: VariationsT = {}

    for value, emoji in group.emojis.items():
        if is_neutral(value):
            emojis[value] = emoji
            continue

        if not collect_variations:
            continue

        key = unqualified_neutral_form(value)
        variations.setdefault(key, []).append(emoji)

    return emojis, variations


def _get_merge_order(category: Category,
                     groups: Iterable[UnicodeGroup]) -> list[UnicodeGroup]:

    available = set(groups)
    ordered = [group for group in GROUP_PRECEDENCE.get(category, ())
               if group in available]
    ordered.extend(group for group in UnicodeGroup
                   if group in available and group not in ordered)
    return ordered


def _check_variations(category: EmojiCategory) -> None:
    canonical = {unqualified_form(value) for value in category.emojis}
    for value in category.variations:
        if value not in canonical:
            log.warning('Variations of %s have no neutral emoji in %s',
                        value, category.name.value)


def normalize_groups(groups: Iterable[EmojiGroup],
                     collect_variations: bool = False
                     ) -> list[EmojiCategory]:
    '''
    Turns Unicode groups into presentation categories ordered by rank.

    Groups sharing a category are merged, the group with higher
    precedence keeps its entries and the others only fill gaps. The
    Component group has no category and is dropped.
    '''
    contributions: dict[Category, dict[UnicodeGroup,
                                       tuple[EmojisT, VariationsT]]] = {}

    for group in groups:
        category = group.name.category
        if category is None:
            log.debug('Dropping %s emojis of group %s',
                      len(group), group.name.value)
            continue

        contributions.setdefault(category, {})[group.name] = split_variations(
            group, collect_variations)

    categories: list[EmojiCategory] = []
    for category, parts in contributions.items():
        emojis: EmojisT = {}
        variations: dict[str, tuple[Emoji, ...]] = {}

        for group_name in _get_merge_order(category, parts):
            group_emojis, group_variations = parts[group_name]
            for value, emoji in group_emojis.items():
                emojis.setdefault(value, emoji)
            for value, variants in group_variations.items():
                variations.setdefault(value, tuple(variants))

        result = EmojiCategory(name=category,
                               emojis=emojis,
                               variations=variations)
        _check_variations(result)
        categories.append(result)

    return sorted(categories, key=lambda category: category.rank)
