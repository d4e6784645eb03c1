"""Configuration classes for tripgraph components."""

from dataclasses import dataclass


@dataclass
class ReportConfig:
    """Text used when query results are rendered for people."""

    # Rendered in place of the sentinel for route-style queries
    no_route_text: str = "NO SUCH ROUTE"

    # Rendered in place of the sentinel for the shortest-distance query
    disconnected_text: str = "NODES ARE DISCONNECTED"

    # Prefix of each numbered output line
    output_prefix: str = "Output #"

    def label(self, index: int) -> str:
        """Return the label of the ``index``-th (1-based) output line."""
        return f"{self.output_prefix}{index}"


# Global configuration instance
REPORT_CONFIG = ReportConfig()
