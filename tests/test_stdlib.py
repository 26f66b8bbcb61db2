import pytest

from minilibc.stdlib import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    RAND_MAX,
    MemoryPool,
    Random,
    atof,
    atoi,
    atol,
)


def test_seed_zero_starts_at_zero_within_rand_max():
    rng = Random(0)
    first = rng.rand()
    assert first == 0
    assert (EXIT_SUCCESS, EXIT_FAILURE, RAND_MAX) == (0, 1, 32767)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("   42", 42), ("-17abc", -17), ("+5", 5), ("abc", 0), ("", 0), ("\t5", 0), ("12 34", 12)],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atol_large_value():
    assert atol("  -9000000000") == -9000000000


@pytest.mark.parametrize("value", [0, 7, -123, 98765])
def test_atoi_round_trip(value):
    assert atoi(str(value)) == value


@pytest.mark.parametrize(
    "text, expected",
    [("3.25", 3.25), ("-0.5", -0.5), ("  +2.", 2.0), ("7", 7.0), (".5", 0.5), ("1e3", 1.0), ("x", 0.0)],
)
def test_atof(text, expected):
    assert atof(text) == pytest.approx(expected)


def test_rand_default_sequence():
    rng = Random()
    assert [rng.rand() for _ in range(3)] == [16838, 5758, 10113]


def test_rand_reseed_repeats_sequence():
    rng = Random(12345)
    first = [rng.rand() for _ in range(10)]
    rng.seed(12345)
    assert [rng.rand() for _ in range(10)] == first


def test_rand_values_in_range():
    rng = Random(99)
    values = [rng.rand() for _ in range(1000)]
    assert all(0 <= v <= RAND_MAX for v in values)
    assert len(set(values)) > 1


def test_malloc_returns_block_and_tracks_usage():
    pool = MemoryPool(64)
    block = pool.malloc(10)
    assert len(block) == 10
    assert pool.used == 10
    assert pool.available == 54


def test_blocks_do_not_overlap():
    pool = MemoryPool(32)
    a = pool.malloc(4)
    b = pool.malloc(4)
    a[:] = b"aaaa"
    b[:] = b"bbbb"
    assert bytes(a) == b"aaaa"
    assert bytes(b) == b"bbbb"


def test_malloc_zero_returns_none():
    pool = MemoryPool(16)
    assert pool.malloc(0) is None
    assert pool.used == 0


def test_malloc_exhaustion_raises():
    pool = MemoryPool(16)
    pool.malloc(16)
    with pytest.raises(MemoryError):
        pool.malloc(1)


def test_malloc_negative_raises():
    with pytest.raises(ValueError):
        MemoryPool(16).malloc(-1)


def test_default_pool_size():
    assert MemoryPool().size == 1024 * 1024


def test_calloc_zero_fills():
    pool = MemoryPool(32)
    block = pool.calloc(4, 3)
    assert bytes(block) == bytes(12)
    assert pool.used == 12


def test_realloc_copies_contents():
    pool = MemoryPool(64)
    old = pool.malloc(4)
    old[:] = b"data"
    new = pool.realloc(old, 8)
    assert bytes(new[:4]) == b"data"
    assert len(new) == 8
    assert pool.used == 12


def test_realloc_shrink_keeps_prefix():
    pool = MemoryPool(64)
    old = pool.malloc(4)
    old[:] = b"wxyz"
    assert bytes(pool.realloc(old, 2)) == b"wx"


def test_realloc_none_allocates():
    pool = MemoryPool(64)
    block = pool.realloc(None, 5)
    assert len(block) == 5


def test_realloc_to_zero_returns_none():
    pool = MemoryPool(64)
    block = pool.malloc(5)
    assert pool.realloc(block, 0) is None


def test_free_does_not_reclaim():
    pool = MemoryPool(64)
    block = pool.malloc(8)
    pool.free(block)
    assert pool.used == 8