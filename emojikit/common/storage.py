# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from emojikit.common.const import EmojiVersion
from emojikit.common.exceptions import DatasetError
from emojikit.common.structs import EmojiCategory

log = logging.getLogger('emojikit.common.storage')


def categories_to_json(categories: Iterable[EmojiCategory]) -> str:
    ordered = sorted(categories, key=lambda category: category.rank)
    return json.dumps([category.to_dict() for category in ordered],
                      ensure_ascii=False,
                      indent=2)


def categories_from_json(text: str | bytes) -> list[EmojiCategory]:
    try:
        data = json.loads(text)
    except ValueError as error:
        raise DatasetError(f'Invalid dataset: {error}') from error

    if not isinstance(data, list):
        raise DatasetError('Invalid dataset: expected a list of categories')

    try:
        categories = [EmojiCategory.from_dict(item) for item in data]
    except (KeyError, TypeError, ValueError, AttributeError) as error:
        raise DatasetError(f'Invalid dataset: {error!r}') from error

    return sorted(categories, key=lambda category: category.rank)


def save_dataset(categories: Iterable[EmojiCategory],
                 version: EmojiVersion,
                 directory: Path) -> Path:

    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f'{version.file_name}.json'
    log.info('Saving emojis to %s', path)
    path.write_text(categories_to_json(categories), encoding='utf-8')
    return path


def load_dataset(path: Path) -> list[EmojiCategory]:
    log.debug('Loading emojis from %s', path)
    return categories_from_json(path.read_bytes())
