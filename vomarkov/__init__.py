"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
from vomarkov.chain_state import ChainState
from vomarkov.errors import InvalidOrderError
from vomarkov.markov_chain import MarkovChain
from vomarkov.weighted_dictionary import WeightedDictionary
