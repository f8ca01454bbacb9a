"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import numpy as np


class WeightedDictionary:
    """Maps tokens to integer weights, keeps the insertion order and a running total."""

    def __init__(self):
        # dicts preserve insertion order, which decides the cumulative buckets in select()
        self._weights = {}
        self.total_weight = 0

    def increment_value(self, token, amount=1):
        if not isinstance(amount, int) or amount <= 0:
            raise ValueError(f"amount must be a positive integer, got {amount!r}")
        self._weights[token] = self._weights.get(token, 0) + amount
        self.total_weight += amount

    def get_value(self, token):
        return self._weights.get(token, 0)

    def contains_key(self, token):
        return token in self._weights

    def keys(self):
        return list(self._weights.keys())

    def items(self):
        return iter(self._weights.items())

    def select(self, value):
        """Returns the first token whose cumulative weight reaches `value`.

        Args:
            value: an int in [1, total_weight]

        Returns:
            the token owning that slice of the total weight
        """
        if value < 1 or value > self.total_weight:
            raise ValueError(f"value {value} outside [1, {self.total_weight}]")
        current_weight = 0
        for token, weight in self._weights.items():
            current_weight += weight
            if current_weight >= value:
                return token
        # unreachable as long as total_weight is the sum of the weights
        raise ValueError(f"total weight {self.total_weight} is out of sync")

    def probabilities(self):
        if self.total_weight == 0:
            return np.zeros(0)
        return np.array(list(self._weights.values()), dtype=float) / self.total_weight

    def __len__(self):
        return len(self._weights)

    def __contains__(self, token):
        return token in self._weights

    def __iter__(self):
        return iter(self._weights)

    def __repr__(self):
        return f"WeightedDictionary({self._weights}, total={self.total_weight})"
