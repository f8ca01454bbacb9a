"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""


class ChainState:
    """The context key: the last tokens seen (at most `order`), oldest first.
    Two states are equal when their tokens are equal, so they can be used as dict keys."""

    __slots__ = ("tokens",)

    def __init__(self, tokens=()):
        object.__setattr__(self, "tokens", tuple(tokens))

    @classmethod
    def from_queue(cls, queue):
        # the queue is the sliding window, its left end is the oldest token
        return cls(queue)

    def __setattr__(self, name, value):
        raise AttributeError("ChainState is immutable")

    def __reduce__(self):
        # rebuilds through __init__, so that copy.deepcopy does not hit __setattr__
        return ChainState, (self.tokens,)

    def __eq__(self, other):
        if not isinstance(other, ChainState):
            return NotImplemented
        return self.tokens == other.tokens

    def __hash__(self):
        return hash(self.tokens)

    def __len__(self):
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)

    def __str__(self):
        return "{" + ", ".join(str(t) for t in self.tokens) + "}"

    def __repr__(self):
        return f"ChainState({list(self.tokens)})"
