from typing import Tuple

# (source value, destination value, count, probability)
Edge = Tuple[str, str, int, float]
