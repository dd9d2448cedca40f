# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

import unittest

from emojikit.common.annotations import iter_annotations
from emojikit.common.annotations import merge_annotations
from emojikit.common.annotations import parse_annotations
from emojikit.common.annotations import split_keywords

ANNOTATIONS_EN = '''<?xml version="1.0" encoding="UTF-8" ?>
<!DOCTYPE ldml SYSTEM "../../common/dtd/ldml.dtd">
<ldml>
    <identity>
        <version number="$Revision$"/>
        <language type="en"/>
    </identity>
    <annotations>
        <annotation cp="\U0001F600">face | grin | grinning face</annotation>
        <annotation cp="\U0001F600" type="tts">grinning face</annotation>
        <annotation cp="\U0001F44D">+1 | hand | thumb | thumbs up | up</annotation>
        <annotation cp="\U0001F44D" type="tts">thumbs up</annotation>
        <annotation cp="\U0001F3F3\u200D\U0001F308">pride | rainbow | rainbow flag</annotation>
        <annotation cp="\U0001F91D">agreement | hand | handshake</annotation>
        <annotation cp="\U0001F91D">deal | handshake</annotation>
        <annotation cp="\U0001F44B">  </annotation>
    </annotations>
</ldml>
'''

ANNOTATIONS_DERIVED_EN = '''<?xml version="1.0" encoding="UTF-8" ?>
<ldml>
    <annotations>
        <annotation cp="\U0001F44D\U0001F3FB">+1 | hand | light skin tone | thumb | thumbs up | up</annotation>
        <annotation cp="\U0001F44D\U0001F3FB" type="tts">thumbs up: light skin tone</annotation>
        <annotation cp="\U0001F600">derived | should not win</annotation>
    </annotations>
</ldml>
'''

ANNOTATIONS_DE = '''<?xml version="1.0" encoding="UTF-8" ?>
<ldml>
    <annotations>
        <annotation cp="\U0001F600">Gesicht | grinsendes Gesicht | lol</annotation>
        <annotation cp="\U0001F355">Pizza</annotation>
    </annotations>
</ldml>
'''

MALFORMED = '<ldml><annotations><annotation cp="x">a</annotations>'


class AnnotationsTest(unittest.TestCase):

    def test_split_keywords(self) -> None:
        self.assertEqual(split_keywords('face | grin |grinning face'),
                         ('face', 'grin', 'grinning face'))
        self.assertEqual(split_keywords(''), ())
        self.assertEqual(split_keywords('a || b'), ('a', 'b'))

    def test_tts_annotations_are_skipped(self) -> None:
        annotations = list(iter_annotations(ANNOTATIONS_EN))
        values = [value for value, _keywords in annotations]
        self.assertNotIn(('\U0001F600', ('grinning face',)), annotations)
        self.assertEqual(values.count('\U0001F600'), 1)
        self.assertEqual(values.count('\U0001F91D'), 2)

    def test_parse_annotations(self) -> None:
        emojis = parse_annotations(ANNOTATIONS_EN)

        grinning = emojis['\U0001F600']
        self.assertEqual(grinning.keywords, ('face', 'grin', 'grinning face'))
        self.assertEqual(grinning.localized_keywords,
                         {'en': ('face', 'grin', 'grinning face')})

        flag = emojis['\U0001F3F3\u200D\U0001F308']
        self.assertEqual(flag.keywords, ('pride', 'rainbow', 'rainbow flag'))

        # The last annotation of a document wins
        self.assertEqual(emojis['\U0001F91D'].keywords, ('deal', 'handshake'))

        self.assertEqual(emojis['\U0001F44B'].keywords, ())

    def test_parse_bytes(self) -> None:
        emojis = parse_annotations(ANNOTATIONS_DE.encode('utf-8'), 'de')
        self.assertEqual(emojis['\U0001F355'].localized_keywords,
                         {'de': ('Pizza',)})

    def test_malformed_document(self) -> None:
        with self.assertLogs('emojikit.common.annotations', level='WARNING'):
            self.assertEqual(parse_annotations(MALFORMED), {})

    def test_merge_same_locale(self) -> None:
        emojis = merge_annotations([
            ('en', ANNOTATIONS_EN),
            ('en', ANNOTATIONS_DERIVED_EN),
        ])

        # The first document of a locale wins
        self.assertEqual(emojis['\U0001F600'].keywords,
                         ('face', 'grin', 'grinning face'))
        self.assertEqual(
            emojis['\U0001F44D\U0001F3FB'].keywords,
            ('+1', 'hand', 'light skin tone', 'thumb', 'thumbs up', 'up'))

    def test_merge_locales(self) -> None:
        emojis = merge_annotations([
            ('en', ANNOTATIONS_EN),
            ('de', ANNOTATIONS_DE),
        ])

        grinning = emojis['\U0001F600']
        self.assertEqual(grinning.keywords, ('face', 'grin', 'grinning face'))
        self.assertEqual(grinning.localized_keywords, {
            'en': ('face', 'grin', 'grinning face'),
            'de': ('Gesicht', 'grinsendes Gesicht', 'lol'),
        })

        pizza = emojis['\U0001F355']
        self.assertEqual(pizza.keywords, ('Pizza',))
        self.assertEqual(pizza.localized_keywords, {'de': ('Pizza',)})

    def test_merge_skips_malformed_documents(self) -> None:
        with self.assertLogs('emojikit.common.annotations', level='WARNING'):
            emojis = merge_annotations([
                ('en', MALFORMED),
                ('de', ANNOTATIONS_DE),
            ])
        self.assertEqual(set(emojis), {'\U0001F600', '\U0001F355'})


if __name__ == '__main__':
    unittest.main()
