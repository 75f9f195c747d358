"""Pipeline storage and the helpers around it."""

from .seed import seed_demo_data
from .store import PipelineStore

__all__ = ["PipelineStore", "seed_demo_data"]
