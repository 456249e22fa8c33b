"""
Random number generation utilities.

Every thread draws from its own numpy Generator. Generators are spawned
from one shared SeedSequence, so seeding once with ``set_random_seed``
gives each worker an independent, non-overlapping stream. A Generator
instance is never shared between threads.
"""

import threading
from typing import Optional

import numpy as np

# Global seed sequence that per-thread generators are spawned from
_seed_sequence = np.random.SeedSequence()
_seed_lock = threading.Lock()
_local = threading.local()
_epoch = 0


def set_random_seed(seed: Optional[int]) -> None:
    """
    Reset the random source.

    Threads that already hold a generator pick up a fresh one spawned
    from the new seed on their next ``get_rng()`` call.

    Args:
        seed: Integer seed, or None for fresh OS entropy
    """
    global _seed_sequence, _epoch

    with _seed_lock:
        _seed_sequence = np.random.SeedSequence(seed)
        _epoch += 1


def get_rng() -> np.random.Generator:
    """
    Get the calling thread's random generator.

    Returns:
        numpy Generator owned by the current thread
    """
    rng = getattr(_local, "rng", None)
    if rng is None or _local.epoch != _epoch:
        with _seed_lock:
            child = _seed_sequence.spawn(1)[0]
            _local.epoch = _epoch
        rng = np.random.default_rng(child)
        _local.rng = rng
    return rng
