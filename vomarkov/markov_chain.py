"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import logging
import operator
from collections import Counter, deque

import numpy as np

from vomarkov import config, utils
from vomarkov.chain_state import ChainState
from vomarkov.errors import InvalidOrderError
from vomarkov.markov_tables import MarkovChainItems, MarkovTerminalItems

logger = logging.getLogger(__name__)

"""
- Variable-order Markov chain over any hashable tokens (chars, words, pitches, chord names...)
- Contexts are ChainStates holding the last `order` tokens, shorter at the start of a sequence.
- Continuations are counted in WeightedDictionaries, in order of first appearance.
- Each learned sequence also counts its final context in the terminal table, so that walks
  end with the same probability as the training sequences did.
- Randomness comes from a sampler(low, high) returning an int in [low, high], injectable for tests.
"""


class MarkovChain:
    def __init__(self, order=None, sampler=None):
        if order is None:
            order = config.DEFAULT_ORDER
        if isinstance(order, bool):
            raise TypeError("order must be an int, got bool")
        # accepts numpy integers too, raises TypeError for floats
        order = operator.index(order)
        if order < 0:
            raise InvalidOrderError("Order must not be less than 0.")
        self.order = order
        self.sampler = sampler if sampler is not None else utils.random_number_between
        self.items = MarkovChainItems()
        self.terminals = MarkovTerminalItems()
        # zero order statistics, the keys are the vocabulary in order of first appearance
        self.token_counts = Counter()
        self.nb_learned_sequences = 0

    def clear_memory(self):
        self.items.clear()
        self.terminals.clear()
        self.token_counts = Counter()
        self.nb_learned_sequences = 0

    def learn_all(self, sequences):
        for sequence in sequences:
            self.learn(sequence)
        logger.debug("learned %d sequences, %d contexts", self.nb_learned_sequences, len(self.items))

    def learn(self, sequence):
        if sequence is None:
            return
        previous = deque(maxlen=self.order)
        nb_tokens = 0
        for token in sequence:
            nb_tokens += 1
            key = ChainState.from_queue(previous)
            self.items.get_or_create(key).increment_value(token, 1)
            self.token_counts[token] += 1
            previous.append(token)
        # an empty iterable leaves no trace, not even a terminal
        if nb_tokens == 0:
            return
        self.terminals.increment_value(ChainState.from_queue(previous), 1)
        self.nb_learned_sequences += 1

    def walk(self, max_length=None):
        return self.walk_with_previous([], max_length=max_length)

    def walk_with_previous(self, previous, max_length=None):
        """Generates a new sequence, continuing `previous` if given.

        Args:
            previous: seed tokens, only the last `order` ones are used as context
            max_length: stops after that many tokens if not None

        Returns:
            the list of generated tokens, without the seed
        """
        result = []
        state = deque(previous if previous is not None else (), maxlen=self.order)
        while True:
            if max_length is not None and len(result) >= max_length:
                logger.debug("walk stopped at max length %d", max_length)
                break
            key = ChainState.from_queue(state)
            weights = self.items.get_value(key)
            if weights is None:
                logger.debug("walk ended on unknown context %s", key)
                break
            terminal_weight = self.terminals.get_value(key)
            value = self.sampler(1, weights.total_weight + terminal_weight)
            # values above the transition weights belong to the terminal
            if value > weights.total_weight:
                logger.debug("walk ended on terminal at context %s", key)
                break
            token = weights.select(value)
            result.append(token)
            state.append(token)
        return result

    def get_all_unique_tokens(self):
        return list(self.token_counts)

    def voc_size(self):
        return len(self.token_counts)

    def get_priors(self):
        # frequencies of the tokens in all learned sequences, aligned with get_all_unique_tokens()
        total_count = sum(self.token_counts.values())
        if total_count == 0:
            return np.zeros(0)
        return np.array(list(self.token_counts.values()), dtype=float) / total_count

    def sample_zero_order(self, k):
        tokens = self.get_all_unique_tokens()
        if not tokens:
            return []
        total_count = sum(self.token_counts.values())
        result = []
        for _ in range(k):
            value = self.sampler(1, total_count)
            current_count = 0
            for token in tokens:
                current_count += self.token_counts[token]
                if current_count >= value:
                    result.append(token)
                    break
        return result

    def get_continuation_probabilities(self, previous):
        """Returns (tokens, probs, terminal_prob) for the context ending `previous`.
        probs follows the order of tokens, and probs.sum() + terminal_prob == 1."""
        context = deque(previous if previous is not None else (), maxlen=self.order)
        key = ChainState.from_queue(context)
        weights = self.items.get_value(key)
        if weights is None:
            return [], np.zeros(0), 1.0
        terminal_weight = self.terminals.get_value(key)
        total = weights.total_weight + terminal_weight
        # rescales the transition-only probabilities to leave room for the terminal
        probs = weights.probabilities() * (weights.total_weight / total)
        return weights.keys(), probs, terminal_weight / total

    def merge(self, other):
        # weights add up, so merging chains learned separately equals learning everything in one
        if other.order != self.order:
            raise ValueError(f"cannot merge chains of order {self.order} and {other.order}")
        for key, weights in other.items.items():
            target = self.items.get_or_create(key)
            for token, weight in weights.items():
                target.increment_value(token, weight)
        for key, weight in other.terminals.items():
            self.terminals.increment_value(key, weight)
        self.token_counts.update(other.token_counts)
        self.nb_learned_sequences += other.nb_learned_sequences

    def show_structure(self):
        print(f"order: {self.order}, learned sequences: {self.nb_learned_sequences}")
        print(f"nb of contexts: {len(self.items)}, nb of terminal contexts: {len(self.terminals)}")
        print(f"voc size: {self.voc_size()}")
        if len(self.items) == 0:
            return
        branching = [len(weights) for _, weights in self.items.items()]
        print(f"min continuations: {min(branching)}, max: {max(branching)}")
        print(f"average nb of continuations: {sum(branching) / len(branching)}")
