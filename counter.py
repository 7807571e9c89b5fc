from operator import itemgetter
from typing import Iterable, Self


def count_chars(text: Iterable[str]) -> dict[str, int]:
    """Count occurrences of each character of `text`.

    Iterating a `str` yields code points, so a character outside the BMP is
    counted once, while a grapheme cluster made of several code points
    contributes one count per code point. Keys keep the order of their first
    occurrence.
    """
    return CharStats().count_text(text).table


class CharStats(object):
    def __init__(self):
        self.table: dict[str, int] = {}
        self.input_size = 0

    def count_char(self, char: str):
        if char in self.table:
            self.table[char] += 1
        else:
            self.table[char] = 1
        self.input_size += 1

    def count_text(self, text: Iterable[str]) -> Self:
        for char in text:
            self.count_char(char)
        return self

    @property
    def total_chars(self) -> int:
        return sum(self.table.values())

    @property
    def distinct_chars(self) -> int:
        return len(self.table)

    def most_common(self) -> list[tuple[str, int]]:
        # sort() is stable, so equal counts stay in first-occurrence order.
        pairs = list(self.table.items())
        pairs.sort(key=itemgetter(1), reverse=True)
        return pairs

    def as_json(self) -> dict:
        return {
            "scanned_chars": self.input_size,
            "distinct_chars": self.distinct_chars,
            "total_chars": self.total_chars,
            "counts": dict(self.table),
        }

    def report(self, show_chars=True):
        print(f"Scanned {self.input_size} characters")
        print(f"Found {self.distinct_chars} different characters")
        if show_chars:
            pairs = self.most_common()
            for char, count in pairs[:200]:
                print(repr(char), " ", count)
            if len(pairs) > 200:
                print(". . .")
