"""Analysis module"""

from .moody import (
	MoodyChart,
	compare_correlations,
	flow_regime,
)

__all__ = [
	"MoodyChart",
	"compare_correlations",
	"flow_regime",
]
