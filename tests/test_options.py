import pytest

from rldpnet.options import NodeMetrics, NodeOptions
from rldpnet.timing import QueryOptions


def test_defaults():
    options = NodeOptions()
    assert options.max_answer_size == 10485760
    assert options.max_peer_queries == 16
    assert options.query_min_timeout_ms == 500
    assert options.query_max_timeout_ms == 10000
    assert options.query_wave_len == 10
    assert options.query_wave_interval_ms == 10
    assert options.force_compression is False


def test_dict_round_trip():
    options = NodeOptions(max_answer_size=1024, force_compression=True, query_wave_len=3)
    assert NodeOptions.from_dict(options.to_dict()) == options


def test_from_dict_fills_defaults():
    options = NodeOptions.from_dict({"max_peer_queries": 4})
    assert options == NodeOptions(max_peer_queries=4)


def test_from_dict_ignores_unknown_keys():
    options = NodeOptions.from_dict({"unknown": 1, "query_wave_len": 5})
    assert options == NodeOptions(query_wave_len=5)


def test_from_empty_dict_is_default():
    assert NodeOptions.from_dict({}) == NodeOptions()


def test_to_dict_keys():
    assert set(NodeOptions().to_dict()) == {
        "max_answer_size",
        "max_peer_queries",
        "query_min_timeout_ms",
        "query_max_timeout_ms",
        "query_wave_len",
        "query_wave_interval_ms",
        "force_compression",
    }


def test_query_options_copies_timing():
    options = NodeOptions(
        query_wave_len=3,
        query_wave_interval_ms=7,
        query_min_timeout_ms=100,
        query_max_timeout_ms=2000,
    )
    assert options.query_options() == QueryOptions(
        query_wave_len=3,
        query_wave_interval_ms=7,
        query_min_timeout_ms=100,
        query_max_timeout_ms=2000,
    )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_answer_size": -1},
        {"max_answer_size": 2**32},
        {"query_wave_len": 2**32},
        {"query_max_timeout_ms": -5},
    ],
)
def test_out_of_range_values(kwargs):
    with pytest.raises(ValueError):
        NodeOptions(**kwargs)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_peer_queries": "16"},
        {"query_wave_len": True},
        {"force_compression": 1},
    ],
)
def test_wrong_types(kwargs):
    with pytest.raises(TypeError):
        NodeOptions(**kwargs)


def test_metrics_fields():
    metrics = NodeMetrics(peer_count=2, transfers_cache_len=5)
    assert (metrics.peer_count, metrics.transfers_cache_len) == (2, 5)
    assert metrics == NodeMetrics(2, 5)