# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import logging
from pathlib import Path

from emojikit.common import configpaths
from emojikit.common.codepoints import unqualified_neutral_form
from emojikit.common.const import EmojiVersion
from emojikit.common.exceptions import DatasetError
from emojikit.common.storage import load_dataset
from emojikit.common.structs import Emoji
from emojikit.common.structs import EmojiCategory

log = logging.getLogger('emojikit.common.manager')


def get_available_emojis(version: EmojiVersion | None = None,
                         show_all_variations: bool = False,
                         path: Path | None = None
                         ) -> list[EmojiCategory]:
    '''
    Returns all categories of a dataset ordered by rank.

    Args:
        version: Defaults to the newest version the interpreter supports
        show_all_variations: Include skin tone variations, only the
            neutral emojis are returned otherwise
        path: Dataset file, defaults to the dataset of `version` in the
            data directory
    '''
    if version is None:
        version = EmojiVersion.get_supported_version()

    if path is None:
        path = configpaths.get_dataset_path(version)

    try:
        categories = load_dataset(path)
    except OSError as error:
        log.warning('Unable to read emoji dataset %s: %s', path, error)
        return []
    except DatasetError as error:
        log.warning('Unable to load emoji dataset %s: %s', path, error)
        return []

    if show_all_variations:
        return categories
    return [category.without_variations() for category in categories]


def get_variations(category: EmojiCategory, value: str) -> tuple[Emoji, ...]:
    return category.variations.get(unqualified_neutral_form(value), ())
