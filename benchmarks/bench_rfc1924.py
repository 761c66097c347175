"""Benchmarks for base85.rfc1924 module."""

from typing import Any

from base85 import decode, encode


class TestEncoderBenchmarks:
    def test_encoder(self, benchmark: Any, random_data: bytes) -> None:
        """Benchmark encode() over 1 MiB."""
        result = benchmark(encode, random_data)
        assert len(result) == len(random_data) // 4 * 5

    def test_encoder_unaligned(self, benchmark: Any, random_data: bytes) -> None:
        """Benchmark encode() with a trailing partial block."""
        data = random_data[:-1]
        result = benchmark(encode, data)
        assert len(result) == len(random_data) // 4 * 5 - 1


class TestDecoderBenchmarks:
    def test_decoder(self, benchmark: Any, encoded_data: str, random_data: bytes) -> None:
        """Benchmark decode() of 1 MiB worth of symbols."""
        result = benchmark(decode, encoded_data)
        assert result == random_data

    def test_decoder_wrapped(self, benchmark: Any, encoded_data: str) -> None:
        """Benchmark decode() with a line feed every 76 symbols."""
        wrapped = "\n".join(
            encoded_data[i : i + 76] for i in range(0, len(encoded_data), 76)
        )
        result = benchmark(decode, wrapped)
        assert len(result) == 0x100000
