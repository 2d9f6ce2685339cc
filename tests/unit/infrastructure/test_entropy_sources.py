import threading

import pytest

from ocid.domain.ports.entropy_source_port import EntropyExhaustedError
from ocid.infrastructure.entropy import (
    FixedEntropySource,
    OsEntropySource,
    SeededEntropySource,
)


class TestOsEntropySource:

    def test_read_size(self):
        source = OsEntropySource()
        assert len(source.read(32)) == 32
        assert source.read(0) == b""

    def test_reads_differ(self):
        source = OsEntropySource()
        assert source.read(32) != source.read(32)


class TestSeededEntropySource:

    def test_same_seed_same_bytes(self):
        assert SeededEntropySource(42).read(64) == SeededEntropySource(42).read(64)

    def test_different_seeds(self):
        assert SeededEntropySource(1).read(32) != SeededEntropySource(2).read(32)

    def test_seed_property(self):
        assert SeededEntropySource(5).seed == 5
        assert SeededEntropySource().seed is None

    def test_concurrent_reads(self):
        source = SeededEntropySource(3)
        results = []

        def worker():
            for _ in range(50):
                results.append(source.read(32))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 200
        assert all(len(chunk) == 32 for chunk in results)


class TestFixedEntropySource:

    def test_replays_in_order(self):
        source = FixedEntropySource(b"abcdef")
        assert source.read(2) == b"ab"
        assert source.read(3) == b"cde"
        assert source.remaining == 1

    def test_exhausted(self):
        source = FixedEntropySource(b"abc")
        source.read(2)

        with pytest.raises(EntropyExhaustedError) as exc_info:
            source.read(2)

        assert exc_info.value.requested == 2
        assert exc_info.value.available == 1
        assert source.remaining == 1
