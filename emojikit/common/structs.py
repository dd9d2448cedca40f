# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import Any

from dataclasses import dataclass
from dataclasses import field

from emojikit.common.const import Category
from emojikit.common.const import UnicodeGroup

LocalizedKeywordsT = dict[str, tuple[str, ...]]


@dataclass(frozen=True)
class Emoji:
    '''
    A single emoji grapheme, compared and hashed by its value only
    '''

    value: str
    keywords: tuple[str, ...] = field(default=(), compare=False)
    localized_keywords: LocalizedKeywordsT = field(default_factory=dict,
                                                   compare=False)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'value': self.value,
            'keywords': list(self.keywords),
        }
        if self.localized_keywords:
            data['localizedKeywords'] = {
                locale: list(keywords)
                for locale, keywords in self.localized_keywords.items()}
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Emoji:
        localized = data.get('localizedKeywords') or {}
        return cls(value=data['value'],
                   keywords=tuple(data.get('keywords', ())),
                   localized_keywords={
                       locale: tuple(keywords)
                       for locale, keywords in localized.items()})


@dataclass(frozen=True)
class EmojiGroup:
    '''
    Emojis of one Unicode group, keyed by value in source file order
    '''

    name: UnicodeGroup
    emojis: dict[str, Emoji] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.emojis)


@dataclass(frozen=True)
class EmojiCategory:
    '''
    A presentation category holding neutral emojis and, per neutral
    emoji, its skin tone variations
    '''

    name: Category
    emojis: dict[str, Emoji] = field(default_factory=dict)
    variations: dict[str, tuple[Emoji, ...]] = field(default_factory=dict)

    @property
    def rank(self) -> int:
        return self.name.rank

    def without_variations(self) -> EmojiCategory:
        return EmojiCategory(name=self.name, emojis=dict(self.emojis))

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name.value,
            'emojis': [emoji.to_dict() for emoji in self.emojis.values()],
            'variations': {
                value: [emoji.to_dict() for emoji in variants]
                for value, variants in self.variations.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmojiCategory:
        emojis = [Emoji.from_dict(item) for item in data.get('emojis', [])]
        variations = data.get('variations') or {}
        return cls(
            name=Category(data['name']),
            emojis={emoji.value: emoji for emoji in emojis},
            variations={
                value: tuple(Emoji.from_dict(item) for item in variants)
                for value, variants in variations.items()})
