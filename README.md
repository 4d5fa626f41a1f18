# rldpnet

Building blocks for a reliable large datagram protocol (RLDP) that runs on top
of a datagram network. The package holds the self-contained parts of such a
transport: payload compression, sequence-number history, transfer progress
counters, timeout arithmetic, query dispatch to subscribers, node options, and
a few small helpers.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `rldpnet.compression`

- `compress(data)` returns `data` unchanged when it is 256 bytes or shorter.
  Longer data becomes a zstd frame (level 3) of the data, followed by a zstd
  frame of its big-endian 32-bit length, followed by the tag byte `0x80`.
- `decompress(data)` reverses this. It returns `None` when the last byte is not
  the tag, when the zstd frames cannot be decoded, or when the stored length
  does not match the decoded data.

Constants: `COMPRESSION_THRESHOLD`, `COMPRESSION_LEVEL`, `TAG_COMPRESSED`.

### `rldpnet.packets_history`

`PacketsHistory` tracks packet sequence numbers. It is thread-safe.

- `PacketsHistory.for_send()` creates a history that only keeps the highest
  sequence number.
- `PacketsHistory.for_recv()` also keeps a 512-bit window of recently
  delivered packets, so it can find duplicates and packets that are too old.
- `deliver_packet(seqno)` records a packet. It returns `False` for a duplicate
  or a packet that is too old, and `True` otherwise.
- `seqno()` is the highest sequence number seen or issued. `bump_seqno()`
  increments it and returns the new value. `reset()` goes back to the initial
  state.

### `rldpnet.transfer_state`

These are thread-safe counters that the sending and receiving sides of a
transfer share.

- `IncomingTransferState`: `updates()` and `increase_updates()`.
- `OutgoingTransferState`:
  - `part()` and `set_part(part)`. The part advances only when `part`
    directly follows the current one.
  - `has_reply()` and `set_reply()`.
  - `seqno_out()` and `set_seqno_out(seqno)`. The value only grows.
  - `seqno_in()` and `set_seqno_in(seqno)`. The value only grows, and a value
    above `seqno_out()` is ignored.

### `rldpnet.timing`

- `QueryOptions`: a frozen dataclass with `query_wave_len`,
  `query_wave_interval_ms`, `query_min_timeout_ms` and `query_max_timeout_ms`.
  - `compute_timeout(roundtrip)` clamps a roundtrip into the timeout range. It
    returns the maximum for `None`.
  - `update_roundtrip(roundtrip, started_at)` folds the time elapsed since the
    `time.monotonic()` value `started_at` into the roundtrip. It returns
    `(new_roundtrip, timeout)`.
  - `big_roundtrip(roundtrip)` doubles the roundtrip, capped at the maximum
    timeout.
  - `completion_interval()` is twice the maximum timeout, in seconds.
- `is_timed_out(started_at, timeout, updates)` checks whether more than
  `timeout + timeout * updates // 100` milliseconds have passed.
- `negate_id(transfer_id)` flips every bit of an id.

### `rldpnet.subscriber`

- `SubscriberContext(adnl, local_id, peer_id)` describes where a message or
  query came from.
- `MessageSubscriber` is an abstract class with the async method
  `try_consume_custom(ctx, constructor, data) -> bool`.
- `QuerySubscriber` is an abstract class with the async method
  `try_consume_query(ctx, constructor, query)`. It returns `Consumed(answer)`
  or `Rejected(query)`.
- `process_query(ctx, subscribers, query)` reads the little-endian 32-bit
  constructor id at the start of the query. It then offers the query to each
  subscriber in turn, and a subscriber that rejects the query may pass on a
  changed query to the next one. The result is a `QueryProcessingResult` with
  the fields `processed` and `answer` and the property `rejected`.
  `process_query` raises `ValueError` for a query shorter than 4 bytes.

### `rldpnet.options`

- `NodeOptions` is a frozen dataclass. Its defaults are:
  - `max_answer_size=10485760`
  - `max_peer_queries=16`
  - `query_min_timeout_ms=500`
  - `query_max_timeout_ms=10000`
  - `query_wave_len=10`
  - `query_wave_interval_ms=10`
  - `force_compression=False`

  Field types and ranges are checked on construction. `query_options()` gives
  the matching `QueryOptions`. `from_dict()` and `to_dict()` convert the
  options to and from plain mappings; in `from_dict()`, unknown keys are
  ignored and missing keys take their defaults.
- `NodeMetrics(peer_count, transfers_cache_len)`.

### `rldpnet.address_list`

`parse_address_list(address_list, clock_tolerance)` checks an `AddressList`
and returns `(host, port)`. It raises `AddressListError` in three cases: the
list has no `Address`, its `reinit_date` is too far in the future, or it has
expired. The error carries the cause in its `reason` attribute.

### `rldpnet.network_builder`

`NetworkBuilder` stacks `DeferredInitialization` layers with `with_layer()`.
`build()` then initialises them, topmost first. With one layer it returns that
component. With two to four layers it returns a tuple in the order the layers
were added. It raises `ValueError` when there are no layers or more than four.

### Helpers

- `rldpnet.updated_at.UpdatedAt` has `refresh()` and `is_expired(timeout)`,
  working in whole seconds. A clock can be passed in.
- `rldpnet.fast_rand` has `fast_thread_rng()`, a per-thread `random.Random`,
  and `gen_fast_bytes(n=32)`. These are not cryptographically secure.
- `rldpnet.util.now()` gives the Unix time as an unsigned 32-bit value.

## Examples

Compression round trip:

    from rldpnet.compression import compress, decompress

    payload = bytes(range(256)) * 8
    packed = compress(payload)
    assert decompress(packed) == payload

Dispatching a query to subscribers:

    import asyncio
    from rldpnet.subscriber import Consumed, QuerySubscriber, process_query

    class Echo(QuerySubscriber):
        async def try_consume_query(self, ctx, constructor, query):
            return Consumed(bytes(query))

    result = asyncio.run(process_query(None, [Echo()], b"\x01\x02\x03\x04data"))
    assert result.processed and result.answer == b"\x01\x02\x03\x04data"

Timeouts:

    from rldpnet.options import NodeOptions

    options = NodeOptions().query_options()
    options.compute_timeout(None)      # 10000, the maximum timeout
    options.compute_timeout(100)       # 500, raised to the minimum timeout

## What this package does not do

The package has no running RLDP node:

- It does not open sockets and does not send or receive datagrams.
- It does not do forward-error-correction encoding or decoding of message
  parts.
- It has no transfer cache that drives queries and answers end to end, and it
  has no command-line tool.

`NodeOptions`, `NodeMetrics`, the transfer states and the timing helpers are
the parts such a node would be configured and driven with.