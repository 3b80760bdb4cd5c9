import random

def seeded_rng(seed: int) -> random.Random:
    """Private generator so sampling never touches the global random state."""
    return random.Random(seed)
