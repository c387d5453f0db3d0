"""HelpGlobe adapters package.

All adapters inherit from BaseAdapter and are iterated generically by the
aggregator. default_adapters() is the registry of feeds served by /api/events.
"""

from __future__ import annotations

from typing import List, Optional

from config.settings import AggregatorConfig
from helpglobe.adapters.base import BaseAdapter
from helpglobe.adapters.gdelt import GDELTAdapter
from helpglobe.adapters.reliefweb import ReliefWebAdapter
from helpglobe.adapters.seed import SeedAdapter
from helpglobe.adapters.usgs import USGSAdapter


def default_adapters(config: Optional[AggregatorConfig] = None) -> List[BaseAdapter]:
    """Build the adapter registry for one aggregation cycle.

    Args:
        config: Aggregator configuration.

    Returns:
        Network adapters in a fixed order, followed by the seed adapter when
        config.include_seed_events is set.
    """
    config = config or AggregatorConfig()
    adapters: List[BaseAdapter] = [
        USGSAdapter(config),
        ReliefWebAdapter(config),
        GDELTAdapter(config),
    ]
    if config.include_seed_events:
        adapters.append(SeedAdapter(config))
    return adapters


__all__ = [
    "BaseAdapter",
    "USGSAdapter",
    "ReliefWebAdapter",
    "GDELTAdapter",
    "SeedAdapter",
    "default_adapters",
]
