"""Services layer - Orchestration on top of the ports."""

from .path_service import ShortestPathService, describe_graph_error

__all__ = ["ShortestPathService", "describe_graph_error"]
