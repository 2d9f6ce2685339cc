import logging
from unittest.mock import MagicMock

import pytest

from ocid.application.services.content_id_service import (
    CapabilityUnavailableError,
    ContentIdService,
)
from ocid.domain.errors import DecodeError, InvalidCharacterError
from ocid.domain.value_objects.content_id import ContentId
from ocid.infrastructure.entropy import SeededEntropySource


@pytest.fixture
def service(blake3_hasher) -> ContentIdService:
    return ContentIdService(
        hasher=blake3_hasher,
        entropy_source=SeededEntropySource(seed=99),
    )


class TestIdentify:

    def test_identify(self, service, blake3_hasher):
        content = b"manifest"
        assert service.identify(content) == ContentId.from_content(
            content, blake3_hasher
        )

    def test_identify_text_is_utf8(self, service):
        assert service.identify_text("héllo") == service.identify(
            "héllo".encode("utf-8")
        )

    def test_hashing_disabled(self):
        service = ContentIdService(hasher=None)

        assert service.can_identify is False
        with pytest.raises(CapabilityUnavailableError) as exc_info:
            service.identify(b"data")
        assert exc_info.value.capability == "hashing"

    def test_hasher_error_not_masked(self):
        hasher = MagicMock()
        hasher.hash.side_effect = MemoryError()
        service = ContentIdService(hasher=hasher)

        with pytest.raises(MemoryError):
            service.identify(b"data")


class TestGenerate:

    def test_generate(self, service):
        expected = ContentId.random(SeededEntropySource(seed=99))
        assert service.generate() == expected

    def test_entropy_disabled(self, blake3_hasher):
        service = ContentIdService(hasher=blake3_hasher)

        assert service.can_generate is False
        with pytest.raises(CapabilityUnavailableError) as exc_info:
            service.generate()
        assert exc_info.value.capability == "entropy"


class TestDecoding:

    def test_decoding_without_capabilities(self, sample_id):
        service = ContentIdService()

        assert service.parse(sample_id.to_text()) == sample_id
        assert service.from_raw_bytes(sample_id.as_bytes()) == sample_id

    def test_parse_invalid(self, service):
        with pytest.raises(DecodeError):
            service.parse("not an id")

    def test_is_valid(self, service, sample_id):
        assert service.is_valid(sample_id.to_text()) is True
        assert service.is_valid(sample_id.to_text()[1:]) is False
        assert service.is_valid("") is False

    def test_is_valid_logs_rejection(self, service, caplog):
        with caplog.at_level(logging.WARNING):
            assert service.is_valid("?" * 43) is False

        assert "Rejected content ID" in caplog.text

    def test_parse_error_detail(self, service):
        with pytest.raises(InvalidCharacterError) as exc_info:
            service.parse("-" * 20 + "!" + "-" * 22)
        assert exc_info.value.position == 20
