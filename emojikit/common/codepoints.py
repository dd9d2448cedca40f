# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import logging

from emojikit.common.const import SKIN_TONE_MODIFIER_FIRST
from emojikit.common.const import SKIN_TONE_MODIFIER_LAST
from emojikit.common.const import VARIATION_SELECTOR_16

log = logging.getLogger('emojikit.common.codepoints')

MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)

# Removing the skin tone from these emojis does not give the scalars of
# their neutral version, so they are mapped by hand
SPECIAL_NEUTRAL_MAPPING: dict[tuple[int, ...], int] = {
    # 🤝 handshake
    (0x1FAF1, 0x200D, 0x1FAF2): 0x1F91D,
    # 👭 women holding hands
    (0x1F469, 0x200D, 0x1F91D, 0x200D, 0x1F469): 0x1F46D,
    # 👫 woman and man holding hands
    (0x1F469, 0x200D, 0x1F91D, 0x200D, 0x1F468): 0x1F46B,
    # 👬 men holding hands
    (0x1F468, 0x200D, 0x1F91D, 0x200D, 0x1F468): 0x1F46C,
    # 💏 kiss: person, person
    (0x1F9D1, 0x200D, 0x2764, 0x200D, 0x1F48B, 0x200D, 0x1F9D1): 0x1F48F,
    # 💑 couple with heart: person, person
    (0x1F9D1, 0x200D, 0x2764, 0x200D, 0x1F9D1): 0x1F491,
}


def decode_codepoint(token: str) -> str | None:
    '''
    Returns the character for a hexadecimal codepoint like "1F600", or
    None if the token is not a valid Unicode scalar value
    '''
    try:
        codepoint = int(token, 16)
    except ValueError:
        log.warning('Invalid codepoint token: %r', token)
        return None

    if codepoint < 0 or codepoint > MAX_CODEPOINT or codepoint in SURROGATES:
        log.warning('Codepoint is not a Unicode scalar value: %r', token)
        return None

    return chr(codepoint)


def decode_codepoints(sequence: str) -> str:
    '''
    Decodes a whitespace separated list of hexadecimal codepoints,
    invalid tokens are skipped
    '''
    characters: list[str] = []
    for token in sequence.split():
        character = decode_codepoint(token)
        if character is not None:
            characters.append(character)
    return ''.join(characters)


def is_skin_tone_modifier(character: str) -> bool:
    return SKIN_TONE_MODIFIER_FIRST <= ord(character) <= SKIN_TONE_MODIFIER_LAST


def is_neutral(value: str) -> bool:
    return not any(is_skin_tone_modifier(char) for char in value)


def neutral_form(value: str) -> str:
    return ''.join(char for char in value if not is_skin_tone_modifier(char))


def unqualified_form(value: str) -> str:
    return value.replace(VARIATION_SELECTOR_16, '')


def unqualified_neutral_form(value: str) -> str:
    '''
    Returns the key a skin toned emoji is grouped under: skin tone
    modifiers and U+FE0F removed, special sequences replaced by the
    emoji they are a variation of
    '''
    unqualified = unqualified_form(neutral_form(value))
    scalars = tuple(ord(char) for char in unqualified)
    mapped = SPECIAL_NEUTRAL_MAPPING.get(scalars)
    if mapped is not None:
        return chr(mapped)
    return unqualified


def format_codepoints(value: str) -> str:
    return ' '.join(f'{ord(char):04X}' for char in value)
