from pennywise_core.io.ledger import load_ledger  # noqa: F401
from pennywise_core.io.config import TrackerConfig, load_tracker_config  # noqa: F401

__all__ = ["load_ledger", "TrackerConfig", "load_tracker_config"]
