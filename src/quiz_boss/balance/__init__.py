"""Balance analysis over batches of simulated battles."""

from quiz_boss.balance.metrics import compute_batch_metrics, compute_passive_metrics
from quiz_boss.balance.models import BatchMetrics, PassiveMetrics

__all__ = [
    "BatchMetrics",
    "PassiveMetrics",
    "compute_batch_metrics",
    "compute_passive_metrics",
]
