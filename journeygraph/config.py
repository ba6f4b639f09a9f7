"""Configuration classes for journeygraph components."""

from dataclasses import dataclass
from typing import Hashable, Iterable, Union


@dataclass
class PlannerConfig:
    """Presentation settings shared by the CLI and report helpers."""

    # Prefix for rendered costs
    currency_symbol: str = "$"

    # Separator between consecutive nodes of a rendered path
    path_separator: str = " -> "

    # Packaged network used when no --network file is given
    sample_network_resource: str = "travel_network.yaml"

    def format_cost(self, value: Union[int, float]) -> str:
        """Render a cost with the currency prefix and thousands separators."""
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return f"{self.currency_symbol}{value:,}"

    def format_path(self, nodes: Iterable[Hashable]) -> str:
        """Join node names with the configured separator."""
        return self.path_separator.join(str(node) for node in nodes)


# Global configuration instance
PLANNER_CONFIG = PlannerConfig()
