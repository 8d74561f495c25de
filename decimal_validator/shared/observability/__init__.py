from .metrics import (
    Metrics,
    generate_metrics,
    get_metrics_registry,
    write_metrics_textfile,
)

__all__ = [
    "Metrics",
    "get_metrics_registry",
    "generate_metrics",
    "write_metrics_textfile",
]
