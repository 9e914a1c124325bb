import pytest

from src.beacon_attendance.beacon_attendance.common import hex_codec
from src.beacon_attendance.beacon_attendance.core.exceptions import DecodeError


@pytest.mark.parametrize("text", ["Ana Lopez", "Nguyễn Văn A", "O'Brien-Smith 2"])
def test_decode_reverses_encode(text):
    assert hex_codec.decode(hex_codec.encode(text)) == text


def test_encode_is_upper_case_byte_pairs():
    assert hex_codec.encode("Ana") == "416E61"


def test_decode_accepts_lower_case_hex():
    assert hex_codec.decode("616e61") == "ana"


@pytest.mark.parametrize("identifier", ["", "   ", "416", "ZZ", "41-6E", "C328", "2020"])
def test_decode_rejects_undecodable_identifiers(identifier):
    with pytest.raises(DecodeError):
        hex_codec.decode(identifier)
