import pytest

from ocid.domain.ports.content_hasher_port import HashAlgorithm
from ocid.infrastructure.hashing import (
    HASHERS,
    Blake3ContentHasher,
    Sha256ContentHasher,
    create_hasher,
)


class TestBlake3ContentHasher:

    def test_algorithm(self, blake3_hasher):
        assert blake3_hasher.algorithm == HashAlgorithm.BLAKE3
        assert blake3_hasher.digest_size == 32

    def test_empty_digest(self, blake3_hasher):
        assert blake3_hasher.hash(b"").hex() == (
            "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"
        )

    def test_digest_size(self, blake3_hasher):
        assert len(blake3_hasher.hash(b"x" * 10000)) == 32


class TestSha256ContentHasher:

    def test_algorithm(self, sha256_hasher):
        assert sha256_hasher.algorithm == HashAlgorithm.SHA256
        assert sha256_hasher.digest_size == 32

    def test_empty_digest(self, sha256_hasher):
        assert sha256_hasher.hash(b"").hex() == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )


class TestCreateHasher:

    def test_every_algorithm_registered(self):
        assert set(HASHERS) == set(HashAlgorithm)

    @pytest.mark.parametrize(
        "algorithm,expected",
        [
            (HashAlgorithm.BLAKE3, Blake3ContentHasher),
            (HashAlgorithm.SHA256, Sha256ContentHasher),
        ],
    )
    def test_create(self, algorithm, expected):
        assert isinstance(create_hasher(algorithm), expected)

    def test_algorithms_disagree(self):
        blake3 = create_hasher(HashAlgorithm.BLAKE3).hash(b"data")
        sha256 = create_hasher(HashAlgorithm.SHA256).hash(b"data")
        assert blake3 != sha256
