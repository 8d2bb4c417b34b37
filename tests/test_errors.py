import pytest
from hypothesis import given
from hypothesis import strategies as st

from bikefix.errors import ErrorCode, TrackerError, raise_for_code

KNOWN = {int(code) for code in ErrorCode}


def test_success_passes():
    assert raise_for_code(0) is ErrorCode.SUCCESS


@pytest.mark.parametrize("code", [c for c in ErrorCode if c is not ErrorCode.SUCCESS])
def test_failures_raise(code):
    with pytest.raises(TrackerError) as info:
        raise_for_code(int(code))
    assert info.value.code is code
    assert code.name in str(info.value)


def test_error_from_int():
    err = TrackerError(-5)
    assert err.code is ErrorCode.ERR_GET_HOSTBYNAME_FAILED


def test_success_is_not_an_error():
    with pytest.raises(ValueError):
        TrackerError(0)


@given(st.integers().filter(lambda n: n not in KNOWN))
def test_unknown_codes_rejected(code):
    with pytest.raises(ValueError):
        raise_for_code(code)


def test_all_failures_negative():
    failures = [c for c in ErrorCode if c is not ErrorCode.SUCCESS]
    raised = [TrackerError(int(c)).code for c in failures]
    assert raised == failures
    assert all(int(code) < 0 for code in raised)
    assert TrackerError(-9).code is ErrorCode.ERR_SOCKET_FAILED