from ._base_service import BaseService
from .executor_service import ExecutorService

__all__ = ["BaseService", "ExecutorService"]
