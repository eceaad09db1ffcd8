"""
Tests for nonce generation and validity windows.
"""

import pytest

from eip3009.exceptions import InvalidTimeWindowError, NonceCollisionError
from eip3009.signing.nonce import NonceGenerator, compute_time_bounds, generate_nonce
from eip3009.types import TransferAuthorizationParams

NOW = 1_700_000_000


def _fixed_clock():
    return float(NOW)


class TestNonceGenerator:
    def test_generate_nonce_length(self):
        assert len(generate_nonce()) == 32

    def test_ten_thousand_unique(self):
        generator = NonceGenerator()
        nonces = {generator.generate() for _ in range(10_000)}
        assert len(nonces) == 10_000
        assert len(generator) == 10_000

    def test_duplicate_is_retried_once(self):
        draws = iter([b"\x01" * 32, b"\x01" * 32, b"\x02" * 32])
        generator = NonceGenerator(random_bytes=lambda n: next(draws))
        assert generator.generate() == b"\x01" * 32
        assert generator.generate() == b"\x02" * 32

    def test_stuck_source_raises(self):
        generator = NonceGenerator(random_bytes=lambda n: b"\x07" * n)
        generator.generate()
        with pytest.raises(NonceCollisionError):
            generator.generate()

    def test_wrong_length_source_raises(self):
        generator = NonceGenerator(random_bytes=lambda n: b"\x07" * 16)
        with pytest.raises(ValueError, match="16 bytes"):
            generator.generate()

    def test_instances_do_not_share_state(self):
        first = NonceGenerator(random_bytes=lambda n: b"\x09" * n)
        second = NonceGenerator(random_bytes=lambda n: b"\x09" * n)
        assert first.generate() == second.generate()


class TestTimeBounds:
    def test_default_window(self):
        assert compute_time_bounds(clock=_fixed_clock) == (NOW, NOW + 3600)

    def test_custom_duration(self):
        assert compute_time_bounds(60, clock=_fixed_clock) == (NOW, NOW + 60)

    def test_skew_moves_valid_after_back(self):
        assert compute_time_bounds(60, clock=_fixed_clock, skew=30) == (NOW - 30, NOW + 60)

    def test_skew_floors_at_zero(self):
        assert compute_time_bounds(60, clock=lambda: 10.0, skew=30) == (0, 70)

    @pytest.mark.parametrize("duration", [0, -1])
    def test_non_positive_duration(self, duration):
        with pytest.raises(InvalidTimeWindowError):
            compute_time_bounds(duration, clock=_fixed_clock)

    def test_negative_skew(self):
        with pytest.raises(InvalidTimeWindowError):
            compute_time_bounds(60, clock=_fixed_clock, skew=-1)

    def test_with_duration_uses_single_clock_read(self, signer_address):
        reads = iter([NOW, NOW + 1000])
        params = TransferAuthorizationParams.with_duration(
            signer_address,
            "0x2222222222222222222222222222222222222222",
            5,
            3600,
            clock=lambda: next(reads),
        )
        assert params.valid_after == NOW
        assert params.valid_before == NOW + 3600
        assert len(params.nonce) == 32
