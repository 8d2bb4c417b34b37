import math
import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bikefix.sms import (
    Alphabet,
    Concat,
    MessageClass,
    Mti,
    NewMessage,
    PortInfo,
    ReadConfirmation,
    Storage,
    ascii_to_gsm7bit,
    ascii_to_ucs2,
    max_text_length,
)

_PLAIN = string.ascii_letters + string.digits + " !\"#%&'()*+,-./:;<=>?@$_\r\n"


def test_max_text_lengths_match_documented_limits():
    assert max_text_length(Alphabet.GSM7_BIT) == 160
    assert max_text_length(Alphabet.EIGHT_BIT) == 140
    assert max_text_length(Alphabet.UCS2) == 70


def test_max_text_length_accepts_int():
    assert max_text_length(2) == 70


def test_max_text_length_unspecified_raises():
    with pytest.raises(ValueError):
        max_text_length(Alphabet.UNSPECIFIED)


def test_mti_report_codes_alias_message_codes():
    assert Mti.DELIVER_REPORT is Mti.DELIVER
    assert Mti.SUBMIT_REPORT is Mti.SUBMIT
    assert Mti.COMMAND is Mti.STATUS_REPORT
    assert Mti(4) is Mti.ILLEGAL


def test_storage_and_class_codes():
    assert Storage(4) is Storage.MT
    assert MessageClass(4) is MessageClass.UNSPECIFIED


def test_ucs2_single_char():
    assert ascii_to_ucs2("A") == b"\x00A"


@given(st.text(alphabet=string.printable, max_size=80))
def test_ucs2_round_trip(text):
    encoded = ascii_to_ucs2(text)
    assert len(encoded) == 2 * len(text)
    assert encoded.decode("utf-16-be") == text


def test_ucs2_rejects_non_ascii():
    with pytest.raises(ValueError):
        ascii_to_ucs2("é")


def test_gsm7bit_known_vector():
    assert ascii_to_gsm7bit("hellohello") == bytes.fromhex("E8329BFD4697D9EC37")


def test_gsm7bit_empty():
    assert ascii_to_gsm7bit("") == b""


def test_gsm7bit_at_sign_is_zero():
    assert ascii_to_gsm7bit("@") == b"\x00"


def test_gsm7bit_extension_takes_two_septets():
    assert len(ascii_to_gsm7bit("{")) == len(ascii_to_gsm7bit("AB"))
    assert ascii_to_gsm7bit("{")[0] & 0x7F == 0x1B


@given(st.text(alphabet=_PLAIN, max_size=200))
def test_gsm7bit_packed_length(text):
    assert len(ascii_to_gsm7bit(text)) == math.ceil(len(text) * 7 / 8)


def test_gsm7bit_rejects_backtick():
    with pytest.raises(ValueError):
        ascii_to_gsm7bit("`")


def test_gsm7bit_rejects_non_ascii():
    with pytest.raises(ValueError):
        ascii_to_gsm7bit("ñ")


def test_read_confirmation_keeps_fields():
    conf = ReadConfirmation("Bob", "16/03/07,10:00:00+32", "hi", "10086", 1, 2)
    assert conf.data == "hi"
    assert conf.length == 2


def test_read_confirmation_name_too_long():
    with pytest.raises(ValueError):
        ReadConfirmation("x" * 44, "", "", "", 0, 0)


def test_read_confirmation_data_limit():
    conf = ReadConfirmation("", "", "d" * 350, "", 0, 350)
    assert len(conf.data) == 350
    with pytest.raises(ValueError):
        ReadConfirmation("", "", "d" * 351, "", 0, 351)


def test_read_confirmation_status_range():
    with pytest.raises(ValueError):
        ReadConfirmation("", "", "", "", 256, 0)


def test_new_message_converts_storage():
    msg = NewMessage(1, 7)
    assert msg.storage is Storage.ME
    assert msg.index == 7


def test_new_message_index_range():
    with pytest.raises(ValueError):
        NewMessage(Storage.SM, 65536)


def test_new_message_bad_storage():
    with pytest.raises(ValueError):
        NewMessage(9, 0)


def test_concat_ranges():
    assert Concat(65535, 3, 1).seg == 1
    with pytest.raises(ValueError):
        Concat(0, 256, 1)


def test_port_info_defaults_invalid():
    info = PortInfo()
    assert info.has_dest_port is False
    assert PortInfo(dest_port=2948).has_dest_port is True


def test_port_info_negative_raises():
    with pytest.raises(ValueError):
        PortInfo(src_port=-1)