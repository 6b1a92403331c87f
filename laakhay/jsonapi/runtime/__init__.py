"""Runtime orchestration components."""

from .cache import Cache
from .model_registry import ModelFactory, ModelRegistry, get_model_registry, register_model
from .paging import BatchPageExecutor, IncrementalFetch, PagePlanner, PageResult
from .resource_map import ResourceMap
from .rest import HTTPClient, Transport, expect_status

__all__ = [
    "BatchPageExecutor",
    "Cache",
    "HTTPClient",
    "IncrementalFetch",
    "ModelFactory",
    "ModelRegistry",
    "PagePlanner",
    "PageResult",
    "ResourceMap",
    "Transport",
    "expect_status",
    "get_model_registry",
    "register_model",
]
