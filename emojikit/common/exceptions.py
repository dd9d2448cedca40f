# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from emojikit.common.const import UnicodeGroup


class EmojiKitError(Exception):
    '''
    This exception is our general exception
    '''

    def __init__(self, text: str = '') -> None:
        Exception.__init__(self)
        self.text = text

    def __str__(self) -> str:
        return self.text


class SourceUnavailable(EmojiKitError):
    '''
    A source document could not be retrieved or decoded
    '''


class DatasetError(EmojiKitError):
    '''
    A serialized dataset could not be decoded
    '''


class CountMismatch(EmojiKitError):
    '''
    The parsed size of a group differs from the published count
    '''

    def __init__(self,
                 group: UnicodeGroup,
                 expected: int,
                 actual: int) -> None:

        EmojiKitError.__init__(
            self,
            f'Group "{group.value}" has {actual} emojis, expected {expected}')
        self.group = group
        self.expected = expected
        self.actual = actual
