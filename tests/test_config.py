import pytest

from app.config import CredentialResolver


def test_resolve_prefers_first_name():
    """두 이름이 모두 있으면 GEMINI_API_KEY가 우선해야 한다."""
    resolver = CredentialResolver(environ={"GEMINI_API_KEY": "primary", "API_KEY": "fallback"})
    assert resolver.resolve() == "primary"


def test_resolve_falls_back_to_api_key():
    resolver = CredentialResolver(environ={"API_KEY": "fallback"})
    assert resolver.resolve() == "fallback"


def test_resolve_skips_blank_values():
    """빈 문자열/공백 값은 설정되지 않은 것으로 본다."""
    resolver = CredentialResolver(environ={"GEMINI_API_KEY": "  ", "API_KEY": "fallback"})
    assert resolver.resolve() == "fallback"


def test_resolve_returns_none_when_unset():
    resolver = CredentialResolver(environ={})
    assert resolver.resolve() is None


def test_resolve_reads_process_environment(monkeypatch):
    """environ을 지정하지 않으면 요청 시점의 os.environ을 읽어야 한다."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    resolver = CredentialResolver()
    assert resolver.resolve() is None

    monkeypatch.setenv("API_KEY", "from-env")
    assert resolver.resolve() == "from-env"


def test_describe_lists_names_in_order():
    assert CredentialResolver().describe() == "GEMINI_API_KEY (or API_KEY)"
    assert CredentialResolver(names=["ONLY_KEY"]).describe() == "ONLY_KEY"


def test_requires_at_least_one_name():
    with pytest.raises(ValueError):
        CredentialResolver(names=[])
