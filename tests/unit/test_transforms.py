"""Tests for primitive field transforms."""

from __future__ import annotations

import logging

import pytest

from visitcodec import DecodeError, EncodeError
from visitcodec.codec.transforms import (
    binary_to_gates,
    bool_to_code,
    code_to_bool,
    decode_identity,
    decode_uuid,
    decode_vehicle_plate,
    encode_identity,
    encode_vehicle_plate,
    format_uuid,
    format_vehicle_plate,
    gates_to_binary,
    gates_to_hex,
    hex_to_gates,
    hex_to_int,
    hex_to_text,
    int_to_hex,
    redact_identity,
    require_hex,
    strip_uuid,
    strip_vehicle_plate,
    text_to_hex,
    to_single_byte,
)


class TestText:
    """Test text <-> hex transforms."""

    def test_text_to_hex(self) -> None:
        assert text_to_hex("AA-1") == "41412d31"
        assert text_to_hex("lorem ipsum") == "6c6f72656d20697073756d"

    def test_empty_text(self) -> None:
        assert text_to_hex("") == ""
        assert hex_to_text("") == ""

    def test_two_digits_per_character(self) -> None:
        """Low code points are zero-padded to two digits."""
        assert text_to_hex("\n") == "0a"
        assert text_to_hex("\x00") == "00"

    def test_single_byte_range(self) -> None:
        """Latin-1 characters round-trip."""
        assert text_to_hex("é") == "e9"
        assert hex_to_text("e9") == "é"
        assert hex_to_text(text_to_hex("Çà ÿ")) == "Çà ÿ"

    def test_hex_to_text_uppercase(self) -> None:
        assert hex_to_text("4A4F") == "JO"

    def test_trailing_odd_digit_dropped(self) -> None:
        assert hex_to_text("41414") == "AA"
        assert hex_to_text("4") == ""

    def test_non_hex_rejected(self) -> None:
        with pytest.raises(DecodeError):
            hex_to_text("4g")
        with pytest.raises(DecodeError):
            hex_to_text("41 41")

    def test_wide_characters_replaced(self, caplog: pytest.LogCaptureFixture) -> None:
        """Characters above U+00FF become '?' and a warning is logged."""
        with caplog.at_level(logging.WARNING, logger="visitcodec.codec.transforms"):
            encoded = text_to_hex("A中B")

        assert encoded == "413f42"
        assert hex_to_text(encoded) == "A?B"
        assert "single-byte" in caplog.text

    def test_to_single_byte(self) -> None:
        assert to_single_byte("Budi 中") == "Budi ?"
        assert to_single_byte("plain") == "plain"


class TestGates:
    """Test gate set <-> bitmask transforms."""

    def test_gates_to_binary(self) -> None:
        assert gates_to_binary([1, 2]) == 0b00000011
        assert gates_to_binary([3, 4]) == 0b00001100
        assert gates_to_binary([8]) == 0b10000000

    def test_duplicates_and_order_ignored(self) -> None:
        assert gates_to_binary([2, 1, 2]) == 0b00000011
        assert binary_to_gates(gates_to_binary([2, 1, 2])) == [1, 2]

    def test_binary_to_gates(self) -> None:
        assert binary_to_gates(0) == []
        assert binary_to_gates(0xFF) == [1, 2, 3, 4, 5, 6, 7, 8]
        assert binary_to_gates(0b10100001) == [1, 6, 8]

    def test_bits_above_gate_range_ignored(self) -> None:
        assert binary_to_gates(0x1FF) == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_fixed_width_hex(self) -> None:
        assert gates_to_hex([]) == "00"
        assert gates_to_hex([8]) == "80"
        assert gates_to_hex([1]) == "01"
        assert gates_to_hex([3, 4, 5]) == "1c"

    def test_hex_to_gates(self) -> None:
        assert hex_to_gates("03") == [1, 2]
        assert hex_to_gates("0c") == [3, 4]
        assert hex_to_gates("80") == [8]

    @pytest.mark.parametrize("gate", [0, 9, -1])
    def test_gate_out_of_range(self, gate: int) -> None:
        with pytest.raises(EncodeError, match="out of bounds"):
            gates_to_binary([1, gate])


class TestNumbersAndFlags:
    """Test integer and boolean transforms."""

    def test_int_to_hex(self) -> None:
        assert int_to_hex(1758092777) == "68ca5de9"
        assert int_to_hex(0) == "0"
        assert int_to_hex(15) == "f"

    def test_hex_to_int(self) -> None:
        assert hex_to_int("68ca5de9") == 1758092777
        assert hex_to_int("0") == 0

    def test_negative_rejected(self) -> None:
        with pytest.raises(EncodeError):
            int_to_hex(-1)

    @pytest.mark.parametrize("value", ["", "0x1f", "1_f", " 1f", "-1", "xyz"])
    def test_hex_to_int_malformed(self, value: str) -> None:
        with pytest.raises(DecodeError):
            hex_to_int(value)

    def test_bool_codes(self) -> None:
        assert bool_to_code(True) == "01"
        assert bool_to_code(False) == "00"

    @pytest.mark.parametrize("code", ["00", "02", "1", "", "zz", "10", "001"])
    def test_anything_but_true_code_is_false(self, code: str) -> None:
        assert code_to_bool(code) is False

    def test_true_code(self) -> None:
        assert code_to_bool("01") is True

    def test_require_hex(self) -> None:
        assert require_hex("00ff") == "00ff"
        with pytest.raises(DecodeError):
            require_hex("00fg")


class TestIdentity:
    """Test identity fragment transforms."""

    def test_encode_identity(self) -> None:
        # 317001 == 0x04d649
        assert encode_identity("317**********001") == "04d649"

    def test_decode_identity(self) -> None:
        assert decode_identity("04d649") == "317**********001"

    def test_middle_digits_discarded(self) -> None:
        assert encode_identity("3171234567890001") == "04d649"
        assert redact_identity("3171234567890001") == "317**********001"

    def test_leading_zeros_kept(self) -> None:
        assert encode_identity("000******000") == "000000"
        assert decode_identity("000000") == "000**********000"
        assert redact_identity("012*345") == "012**********345"

    def test_maximum_value(self) -> None:
        assert encode_identity("999***999") == "0f423f"
        assert decode_identity("0f423f") == "999**********999"

    @pytest.mark.parametrize("identity", ["", "12**34", "abc**********def", "31*00", "31x*****001"])
    def test_missing_digits(self, identity: str) -> None:
        with pytest.raises(EncodeError):
            encode_identity(identity)

    def test_decoded_value_too_wide(self) -> None:
        with pytest.raises(DecodeError):
            decode_identity("0f4240")  # 1000000


class TestVehiclePlate:
    """Test vehicle plate formatting."""

    def test_strip_spaces(self) -> None:
        assert strip_vehicle_plate("BE 1199 AA") == "BE1199AA"
        assert strip_vehicle_plate(" B  12\tCD ") == "B12CD"

    def test_format(self) -> None:
        assert format_vehicle_plate("BE1199AA") == "BE 1199 AA"
        assert format_vehicle_plate("b1c") == "b 1 c"

    @pytest.mark.parametrize("plate", ["1199AA", "BE1199", "BE11A9AA", "", "BE-1199-AA"])
    def test_unformatted_shapes_returned_as_is(self, plate: str) -> None:
        assert format_vehicle_plate(plate) == plate

    def test_plate_round_trip(self) -> None:
        encoded = encode_vehicle_plate("BE 1199 AA")
        assert encoded == "4245313139394141"
        assert decode_vehicle_plate(encoded) == "BE 1199 AA"

    def test_spacing_normalized(self) -> None:
        assert decode_vehicle_plate(encode_vehicle_plate("BE1199  AA")) == "BE 1199 AA"


class TestIdentifier:
    """Test visit identifier formatting."""

    def test_format_uuid(self) -> None:
        assert (
            format_uuid("f3d5c6a81eab4b1aa8d4092cf15b65e9")
            == "f3d5c6a8-1eab-4b1a-a8d4-092cf15b65e9"
        )

    def test_strip_uuid(self) -> None:
        assert strip_uuid("f3d5c6a8-1eab-4b1a-a8d4-092cf15b65e9") == (
            "f3d5c6a81eab4b1aa8d4092cf15b65e9"
        )

    def test_strip_uuid_lowercases(self) -> None:
        assert strip_uuid("F3D5C6A8-1EAB-4B1A-A8D4-092CF15B65E9") == (
            "f3d5c6a81eab4b1aa8d4092cf15b65e9"
        )

    def test_wrong_length_unchanged(self) -> None:
        assert format_uuid("f3d5c6a8") == "f3d5c6a8"

    def test_decode_uuid_rejects_non_hex(self) -> None:
        with pytest.raises(DecodeError):
            decode_uuid("z3d5c6a81eab4b1aa8d4092cf15b65e9")
