from typing import List

import pytest

from ocid.domain.value_objects.content_id import ContentId
from ocid.infrastructure.entropy import SeededEntropySource
from ocid.infrastructure.hashing import Blake3ContentHasher, Sha256ContentHasher

@pytest.fixture
def blake3_hasher() -> Blake3ContentHasher:
    return Blake3ContentHasher()

@pytest.fixture
def sha256_hasher() -> Sha256ContentHasher:
    return Sha256ContentHasher()

@pytest.fixture
def seeded_source() -> SeededEntropySource:
    return SeededEntropySource(seed=1234)

@pytest.fixture
def sample_id(blake3_hasher: Blake3ContentHasher) -> ContentId:
    return ContentId.from_content(b"sample package manifest", blake3_hasher)

@pytest.fixture
def random_ids(seeded_source: SeededEntropySource) -> List[ContentId]:
    return [ContentId.random(seeded_source) for _ in range(64)]
