# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import importlib.resources
import os
from pathlib import Path

from emojikit.common.const import EmojiVersion

DATA_DIR_ENV = 'EMOJIKIT_DATA_DIR'


class ConfigPaths:
    def __init__(self) -> None:
        self.custom_data_root: Path | None = None

    def get_data_dir(self) -> Path:
        if self.custom_data_root is not None:
            return self.custom_data_root

        env_root = os.environ.get(DATA_DIR_ENV)
        if env_root:
            return Path(env_root).resolve()

        return Path(str(importlib.resources.files('emojikit'))) / 'data'


def get_data_dir() -> Path:
    return _paths.get_data_dir()


def get_dataset_path(version: EmojiVersion) -> Path:
    return _paths.get_data_dir() / f'{version.file_name}.json'


def set_data_root(data_root: str | Path | None) -> None:
    if data_root is None:
        _paths.custom_data_root = None
        return
    _paths.custom_data_root = Path(data_root).resolve()


_paths = ConfigPaths()
