import math

from markov.chain.model import Model
from markov.chain.row import NormalizingRow


def row_entropy(row: NormalizingRow, log_base: float = math.e) -> float:
    """Entropy of the successor distribution of one row; 0 for an empty row."""
    if row.observation_count == 0:
        return 0.0
    h = 0.0
    for p in row.weights().values():
        if p <= 0.0:
            continue
        h -= p * math.log(p)
    if log_base != math.e:
        h /= math.log(log_base)
    return h


def mean_branching_entropy(model: Model, log_base: float = math.e) -> float:
    """
    Unweighted mean of ``row_entropy`` over all source states:

        H(X_{t+1} | X_t=s) = - sum_{s'} p(s'|s) log p(s'|s)

    log_base:
      - math.e -> nats
      - 2.0    -> bits
    """
    entropies = [row_entropy(row, log_base=log_base) for _, row in model.rows()]
    return sum(entropies) / (len(entropies) or 1)


def mean_branching_entropy_weighted(model: Model, log_base: float = math.e) -> float:
    """
    Weighted variant: each row contributes in proportion to its observation
    count, i.e. the empirical entropy rate of the training sequence.
    """
    total_w = 0
    total = 0.0
    for _, row in model.rows():
        w = row.observation_count
        total_w += w
        total += w * row_entropy(row, log_base=log_base)

    if total_w <= 0:
        return 0.0

    return total / total_w
