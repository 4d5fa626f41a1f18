"""RLDP node configuration and metrics."""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping

from .timing import QueryOptions

_U32_MAX = 0xFFFFFFFF
_U64_MAX = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True)
class NodeOptions:
    """RLDP node configuration.

    ``max_answer_size``: largest accepted answer in bytes.
    ``max_peer_queries``: parallel queries allowed per peer.
    ``query_min_timeout_ms`` / ``query_max_timeout_ms``: timeout bounds.
    ``query_wave_len``: FEC packets sent per wave.
    ``query_wave_interval_ms``: pause between waves.
    ``force_compression``: compress outgoing queries.
    """

    max_answer_size: int = 10 * 1024 * 1024
    max_peer_queries: int = 16
    query_min_timeout_ms: int = 500
    query_max_timeout_ms: int = 10000
    query_wave_len: int = 10
    query_wave_interval_ms: int = 10
    force_compression: bool = False

    def __post_init__(self) -> None:
        limits = {
            "max_answer_size": _U32_MAX,
            "max_peer_queries": _U64_MAX,
            "query_min_timeout_ms": _U64_MAX,
            "query_max_timeout_ms": _U64_MAX,
            "query_wave_len": _U32_MAX,
            "query_wave_interval_ms": _U64_MAX,
        }
        for name, limit in limits.items():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer")
            if not 0 <= value <= limit:
                raise ValueError(f"{name} is out of range")
        if not isinstance(self.force_compression, bool):
            raise TypeError("force_compression must be a boolean")

    def query_options(self) -> QueryOptions:
        """Timing parameters used by transfers."""
        return QueryOptions(
            query_wave_len=self.query_wave_len,
            query_wave_interval_ms=self.query_wave_interval_ms,
            query_min_timeout_ms=self.query_min_timeout_ms,
            query_max_timeout_ms=self.query_max_timeout_ms,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NodeOptions":
        """Build options from a mapping; missing keys take defaults, unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        """Return the options as a plain dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class NodeMetrics:
    """Instant RLDP node metrics."""

    peer_count: int
    transfers_cache_len: int