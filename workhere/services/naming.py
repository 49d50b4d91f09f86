"""Random branch name generation."""

import random
from typing import Optional

from workhere.constants import FIRST_NAMES, LAST_NAMES


def generate_branch_name(rng: Optional[random.Random] = None) -> str:
    """Generate a readable branch name such as ``alice-smith-3f0a``.

    Args:
        rng: Random source. Defaults to ``random.SystemRandom()``; pass a
            seeded ``random.Random`` for reproducible names.

    Returns:
        ``<first>-<last>-<4 hex chars>``. Names are not guaranteed unique.
    """
    if rng is None:
        rng = random.SystemRandom()

    first_name = rng.choice(FIRST_NAMES)
    last_name = rng.choice(LAST_NAMES)
    short_hash = f"{rng.getrandbits(16):04x}"

    return f"{first_name}-{last_name}-{short_hash}"
