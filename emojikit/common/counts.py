# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import logging
from collections.abc import Iterable
from html.parser import HTMLParser

from emojikit.common.const import UnicodeGroup
from emojikit.common.exceptions import CountMismatch
from emojikit.common.structs import EmojiGroup

log = logging.getLogger('emojikit.common.counts')


class EmojiCountParser(HTMLParser):
    '''
    Reads the header and the footer row of the first table in the
    emoji-counts.html chart
    '''

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)

        self._rows: list[list[str]] = []
        self._cells: list[str] | None = None
        self._cell_text: list[str] | None = None
        self._in_table = False

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        match tag:
            case 'table':
                self._in_table = True
            case 'tr' if self._in_table:
                # </tr> and </th> are optional in HTML
                self._finish_row()
                self._cells = []
            case 'th' if self._cells is not None:
                self._finish_cell()
                self._cell_text = []
            case 'td' if self._cells is not None:
                self._finish_cell()
            case _:
                pass

    def handle_endtag(self, tag: str) -> None:
        match tag:
            case 'th' | 'td':
                self._finish_cell()
            case 'tr':
                self._finish_row()
            case 'table' if self._in_table:
                self._finish_row()
                raise EOF
            case _:
                pass

    def handle_data(self, data: str) -> None:
        if self._cell_text is not None:
            self._cell_text.append(data)

    def _finish_cell(self) -> None:
        if self._cells is not None and self._cell_text is not None:
            self._cells.append(' '.join(''.join(self._cell_text).split()))
        self._cell_text = None

    def _finish_row(self) -> None:
        self._finish_cell()
        if self._cells is not None:
            self._rows.append(self._cells)
        self._cells = None

    def parse(self, text: str) -> dict[UnicodeGroup, int]:
        try:
            self.feed(text)
            self.close()
        except EOF:
            pass
        self._finish_row()

        rows = [row for row in self._rows if row]
        if len(rows) < 2:
            log.warning('No count table found')
            return {}

        names = rows[0][1:-1]
        totals = rows[-1][1:-1]

        counts: dict[UnicodeGroup, int] = {}
        for name, total in zip(names, totals):
            group = UnicodeGroup.from_name(name)
            if group is None:
                log.debug('Ignoring count for unknown group: %s', name)
                continue

            try:
                counts[group] = int(total.replace(',', ''))
            except ValueError:
                log.warning('Invalid count for group %s: %r', name, total)

        return counts


class EOF(Exception):
    pass


def parse_counts(text: str) -> dict[UnicodeGroup, int]:
    return EmojiCountParser().parse(text)


def validate_counts(groups: Iterable[EmojiGroup],
                    expected: dict[UnicodeGroup, int]) -> None:
    '''
    Raises CountMismatch for the first group whose size differs from the
    expected count, groups without an expected count are not checked
    '''
    if not expected:
        log.warning('No expected counts, skipping validation')
        return

    for group in groups:
        count = expected.get(group.name)
        if count is None:
            continue

        if count != len(group):
            raise CountMismatch(group.name, count, len(group))

        log.debug('Group %s matches expected count %s',
                  group.name.value, count)
