# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

'''
Parser for the emoji enumeration published by the Unicode Consortium
(emoji-test.txt), see <https://unicode.org/reports/tr51/#emoji_data>

Example lines:

    # group: Smileys & Emotion
    # subgroup: face-smiling
    1F600 ; fully-qualified     # 😀 E1.0 grinning face
    263A  ; unqualified         # ☺ E0.6 smiling face
'''

from __future__ import annotations

import logging
from collections.abc import Mapping

from emojikit.common.codepoints import decode_codepoints
from emojikit.common.codepoints import format_codepoints
from emojikit.common.codepoints import unqualified_form
from emojikit.common.codepoints import unqualified_neutral_form
from emojikit.common.const import COMMENT_MARKER
from emojikit.common.const import FALLBACK_GROUP
from emojikit.common.const import GROUP_HEADER_MARKER
from emojikit.common.const import SKIPPED_STATUSES
from emojikit.common.const import UnicodeGroup
from emojikit.common.structs import Emoji
from emojikit.common.structs import EmojiGroup

log = logging.getLogger('emojikit.common.emoji_list')

FIELD_SEPARATOR = ';'


class EmojiListParser:
    def __init__(self, annotations: Mapping[str, Emoji] | None = None) -> None:
        self._annotations: Mapping[str, Emoji] = annotations or {}

    def parse(self, text: str) -> list[EmojiGroup]:
        '''
        Returns all groups in enumeration order, groups without emojis
        included
        '''
        groups = {group: EmojiGroup(name=group) for group in UnicodeGroup}
        current_group = FALLBACK_GROUP

        for line in text.splitlines():
            if line.startswith(GROUP_HEADER_MARKER):
                current_group = self._parse_group_header(line, current_group)
                continue

            if not line.strip() or line.startswith(COMMENT_MARKER):
                continue

            emoji = self._parse_data_line(line)
            if emoji is None:
                continue

            groups[current_group].emojis[emoji.value] = emoji

        for group in groups.values():
            log.info('Parsed %s emojis for group %s',
                     len(group), group.name.value)
        return list(groups.values())

    @staticmethod
    def _parse_group_header(line: str,
                            current_group: UnicodeGroup) -> UnicodeGroup:

        name = line[len(GROUP_HEADER_MARKER):].strip()
        group = UnicodeGroup.from_name(name)
        if group is None:
            log.warning('Ignoring unknown group: %s', name)
            return current_group
        return group

    def _parse_data_line(self, line: str) -> Emoji | None:
        fields = line.split(FIELD_SEPARATOR)
        if len(fields) < 2:
            log.debug('Skipping line without status: %r', line)
            return None

        sequence = fields[0].strip()
        if not sequence:
            log.debug('Skipping line without codepoints: %r', line)
            return None

        status = fields[1].split(COMMENT_MARKER, 1)[0].strip()
        if status in SKIPPED_STATUSES:
            return None

        value = decode_codepoints(sequence)
        if not value:
            return None

        is_sequence = len(sequence.split()) > 1
        match = self._lookup(value)
        if match is None:
            if is_sequence:
                log.info('No annotation found for sequence %s (%s)',
                         value, format_codepoints(value))
            return Emoji(value=value)

        if is_sequence and not match.keywords:
            log.info('Annotation without keywords for sequence %s (%s)',
                     value, format_codepoints(value))

        return Emoji(value=value,
                     keywords=match.keywords,
                     localized_keywords=dict(match.localized_keywords))

    def _lookup(self, value: str) -> Emoji | None:
        # Annotations are keyed without U+FE0F
        for key in (unqualified_form(value), unqualified_neutral_form(value)):
            match = self._annotations.get(key)
            if match is not None:
                return match
        return None


def parse_emoji_list(text: str,
                     annotations: Mapping[str, Emoji] | None = None
                     ) -> list[EmojiGroup]:

    return EmojiListParser(annotations).parse(text)
