import pytest

from listkit.utils import getenv_bool, getenv_str


def test_getenv_bool_reads_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LISTKIT_TEST_FLAG", "True")
    assert getenv_bool("LISTKIT_TEST_FLAG") is True

    monkeypatch.setenv("LISTKIT_TEST_FLAG", "no")
    assert getenv_bool("LISTKIT_TEST_FLAG", True) is False


def test_getenv_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LISTKIT_TEST_FLAG", raising=False)

    assert getenv_bool("LISTKIT_TEST_FLAG") is None
    assert getenv_bool("LISTKIT_TEST_FLAG", False) is False


def test_getenv_str(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LISTKIT_TEST_TEXT", "value")
    assert getenv_str("LISTKIT_TEST_TEXT") == "value"

    monkeypatch.setenv("LISTKIT_TEST_TEXT", "")
    assert getenv_str("LISTKIT_TEST_TEXT", "default") == "default"


def test_required_value_missing_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LISTKIT_TEST_TEXT", raising=False)

    with pytest.raises(ValueError):
        getenv_str("LISTKIT_TEST_TEXT", required=True)

    with pytest.raises(ValueError):
        getenv_bool("LISTKIT_TEST_TEXT", required=True)
