# SPDX-License-Identifier: MIT

from trackmytime.model.entry import Entry


def sort_entries_by_start(entries: list[Entry], newest_first: bool) -> list[Entry]:
    # sorted() is stable in both directions, so equal starts keep input order
    return sorted(entries, key=lambda entry: entry["start"], reverse=newest_first)
