# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import unicodedata
from enum import Enum
from enum import unique

from packaging.version import Version as V

SKIN_TONE_MODIFIER_FIRST = 0x1F3FB
SKIN_TONE_MODIFIER_LAST = 0x1F3FF

VARIATION_SELECTOR_16 = '\uFE0F'

GROUP_HEADER_MARKER = '# group:'
COMMENT_MARKER = '#'

UNQUALIFIED = 'unqualified'
MINIMALLY_QUALIFIED = 'minimally-qualified'
SKIPPED_STATUSES = frozenset({UNQUALIFIED, MINIMALLY_QUALIFIED})

TTS_ANNOTATION_TYPE = 'tts'
KEYWORD_SEPARATOR = '|'

DEFAULT_LOCALE = 'en'

# Pinned so that keyword data is reproducible between runs
CLDR_REVISION = 'c1dc8c7ef6584668345cf741e51b1722d8114bc8'
CLDR_BASE_URL = ('https://raw.githubusercontent.com/unicode-org/cldr/'
                 f'{CLDR_REVISION}/common')
CLDR_ANNOTATIONS_URL = CLDR_BASE_URL + '/annotations/{locale}.xml'
CLDR_ANNOTATIONS_DERIVED_URL = CLDR_BASE_URL + '/annotationsDerived/{locale}.xml'

EMOJI_TEST_URL = 'https://unicode.org/Public/emoji/{version}/emoji-test.txt'
EMOJI_COUNTS_URL = ('https://www.unicode.org/emoji/'
                    'charts-{version}/emoji-counts.html')

REQUEST_TIMEOUT = 30


@unique
class Category(Enum):
    FREQUENTLY_USED = 'frequentlyUsed'
    SMILEYS_AND_PEOPLE = 'smileysAndPeople'
    ANIMALS_AND_NATURE = 'animalsAndNature'
    FOOD_AND_DRINK = 'foodAndDrink'
    ACTIVITY = 'activity'
    TRAVEL_AND_PLACES = 'travelAndPlaces'
    OBJECTS = 'objects'
    SYMBOLS = 'symbols'
    FLAGS = 'flags'

    @property
    def rank(self) -> int:
        return CATEGORY_RANKS[self]

    @classmethod
    def ordered(cls) -> list[Category]:
        return sorted(cls, key=lambda category: category.rank)


CATEGORY_RANKS: dict[Category, int] = {
    Category.FREQUENTLY_USED: 0,
    Category.SMILEYS_AND_PEOPLE: 1,
    Category.ANIMALS_AND_NATURE: 2,
    Category.FOOD_AND_DRINK: 3,
    Category.ACTIVITY: 4,
    Category.TRAVEL_AND_PLACES: 5,
    Category.OBJECTS: 6,
    Category.SYMBOLS: 7,
    Category.FLAGS: 8,
}


@unique
class UnicodeGroup(Enum):
    # Member order is the canonical group enumeration order
    FLAGS = 'Flags'
    ACTIVITIES = 'Activities'
    COMPONENT = 'Component'
    OBJECTS = 'Objects'
    TRAVEL_AND_PLACES = 'Travel & Places'
    SYMBOLS = 'Symbols'
    PEOPLE_AND_BODY = 'People & Body'
    ANIMALS_AND_NATURE = 'Animals & Nature'
    FOOD_AND_DRINK = 'Food & Drink'
    SMILEYS_AND_EMOTION = 'Smileys & Emotion'

    @property
    def category(self) -> Category | None:
        return GROUP_CATEGORIES[self]

    @classmethod
    def from_name(cls, name: str) -> UnicodeGroup | None:
        try:
            return cls(name.strip())
        except ValueError:
            return None


GROUP_CATEGORIES: dict[UnicodeGroup, Category | None] = {
    UnicodeGroup.FLAGS: Category.FLAGS,
    UnicodeGroup.ACTIVITIES: Category.ACTIVITY,
    UnicodeGroup.COMPONENT: None,
    UnicodeGroup.OBJECTS: Category.OBJECTS,
    UnicodeGroup.TRAVEL_AND_PLACES: Category.TRAVEL_AND_PLACES,
    UnicodeGroup.SYMBOLS: Category.SYMBOLS,
    UnicodeGroup.PEOPLE_AND_BODY: Category.SMILEYS_AND_PEOPLE,
    UnicodeGroup.ANIMALS_AND_NATURE: Category.ANIMALS_AND_NATURE,
    UnicodeGroup.FOOD_AND_DRINK: Category.FOOD_AND_DRINK,
    UnicodeGroup.SMILEYS_AND_EMOTION: Category.SMILEYS_AND_PEOPLE,
}

# Groups listed first win when several groups feed the same category
GROUP_PRECEDENCE: dict[Category, tuple[UnicodeGroup, ...]] = {
    Category.SMILEYS_AND_PEOPLE: (
        UnicodeGroup.SMILEYS_AND_EMOTION,
        UnicodeGroup.PEOPLE_AND_BODY,
    ),
}

FALLBACK_GROUP = UnicodeGroup.ACTIVITIES


@unique
class EmojiVersion(Enum):
    V13_1 = '13.1'
    V14 = '14.0'
    V15 = '15.0'
    V15_1 = '15.1'

    @property
    def version_identifier(self) -> str:
        return self.value

    @property
    def file_name(self) -> str:
        return f'emojis_v{self.version_identifier}'

    @property
    def emoji_test_url(self) -> str:
        return EMOJI_TEST_URL.format(version=self.version_identifier)

    @property
    def emoji_counts_url(self) -> str:
        return EMOJI_COUNTS_URL.format(version=self.version_identifier)

    @classmethod
    def from_string(cls, value: str) -> EmojiVersion:
        '''
        Accepts "15", "15.0" or "v15.0"
        '''
        wanted = V(value.lstrip('vV'))
        for version in cls:
            if V(version.value) == wanted:
                return version
        raise ValueError(f'Unsupported emoji version: {value}')

    @classmethod
    def get_supported_version(cls,
                              unicode_version: str | None = None
                              ) -> EmojiVersion:
        '''
        Returns the newest emoji version the Unicode database of the
        running interpreter can render, the oldest one otherwise
        '''
        if unicode_version is None:
            unicode_version = unicodedata.unidata_version

        available = V(unicode_version)
        supported = [version for version in cls
                     if V(version.value) <= available]
        if not supported:
            return min(cls, key=lambda version: V(version.value))
        return max(supported, key=lambda version: V(version.value))
