"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import os

# --- Model defaults ---
# order used when a MarkovChain is built without one
DEFAULT_ORDER = int(os.environ.get('VOMARKOV_DEFAULT_ORDER', 2))

# --- Randomness ---
# seed of the module-level sampler in vomarkov.utils, unset means fresh entropy
_seed = os.environ.get('VOMARKOV_SEED')
RANDOM_SEED = int(_seed) if _seed else None
