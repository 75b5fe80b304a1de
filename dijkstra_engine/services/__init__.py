"""Services layer - Consumers of the engine.

Services wire ports together to produce user-facing output.
"""

from .path_report import PathReportService

__all__ = ["PathReportService"]
