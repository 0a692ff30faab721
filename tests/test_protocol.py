import signal

import pytest

from sigtalk.protocol import (
    BitDecoder,
    bit_for_signal,
    byte_to_bits,
    message_to_bits,
    signal_for_bit,
)


def test_byte_to_bits_is_msb_first():
    assert byte_to_bits(0x41) == [0, 1, 0, 0, 0, 0, 0, 1]


def test_byte_to_bits_round_trip_for_every_byte():
    for byte in range(256):
        bits = byte_to_bits(byte)
        assert len(bits) == 8
        assert int("".join(map(str, bits)), 2) == byte


@pytest.mark.parametrize("value", [-1, 256, 1000])
def test_byte_to_bits_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        byte_to_bits(value)


def _decode(bits):
    decoder = BitDecoder()
    return bytes(b for b in (decoder.feed(bit) for bit in bits) if b is not None)


@pytest.mark.parametrize("message", ["Hi", "", "grüße", b"\x00\xff raw"])
def test_message_round_trip(message):
    bits = list(message_to_bits(message))
    expected = message.encode("utf-8") if isinstance(message, str) else message
    assert len(bits) == 8 * len(expected)
    assert _decode(bits) == expected


def test_signal_mapping():
    assert signal_for_bit(0) == signal.SIGUSR1
    assert signal_for_bit(1) == signal.SIGUSR2
    assert bit_for_signal(signal.SIGUSR1) == 0
    assert bit_for_signal(signal.SIGUSR2) == 1


def test_signal_mapping_errors():
    with pytest.raises(ValueError):
        signal_for_bit(2)
    with pytest.raises(ValueError):
        bit_for_signal(signal.SIGINT)


def test_decoder_returns_byte_only_after_eight_bits():
    decoder = BitDecoder()
    bits = byte_to_bits(ord("z"))
    partial = [decoder.feed(bit) for bit in bits[:-1]]
    assert partial == [None] * 7
    assert decoder.feed(bits[-1]) == ord("z")


def test_decoder_resets_between_bytes():
    decoder = BitDecoder()
    results = [decoder.feed(bit) for bit in byte_to_bits(0xFF) + byte_to_bits(0x0F)]
    assert [r for r in results if r is not None] == [0xFF, 0x0F]


def test_decoder_rejects_non_bits():
    with pytest.raises(ValueError):
        BitDecoder().feed(3)