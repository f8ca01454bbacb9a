"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
from vomarkov.weighted_dictionary import WeightedDictionary


class _StateTable:
    # ChainState keyed table, entries are created lazily and never removed
    def __init__(self):
        self._table = {}

    def contains_key(self, key):
        return key in self._table

    def keys(self):
        return list(self._table.keys())

    def items(self):
        return iter(self._table.items())

    def clear(self):
        self._table = {}

    def __len__(self):
        return len(self._table)

    def __contains__(self, key):
        return key in self._table


class MarkovChainItems(_StateTable):
    """Transition table: what follows each context, and how often."""

    def get_value(self, key):
        return self._table.get(key)

    def get_or_create(self, key):
        weights = self._table.get(key)
        if weights is None:
            weights = WeightedDictionary()
            self._table[key] = weights
        return weights


class MarkovTerminalItems(_StateTable):
    """Terminal table: how many learned sequences ended with each context."""

    def get_value(self, key):
        return self._table.get(key, 0)

    def increment_value(self, key, amount=1):
        self._table[key] = self._table.get(key, 0) + amount
