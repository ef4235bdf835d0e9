"""Unit tests for LLM provider utilities."""

import pytest

from vitae.utils.llm import LLMProvider, LLMResponse, _retry_with_backoff, get_provider


class Transient(Exception):
    pass


@pytest.mark.unit
def test_retry_succeeds_after_transient_errors():
    attempts = []

    def operation():
        attempts.append(1)
        if len(attempts) < 3:
            raise Transient()
        return "ok"

    result = _retry_with_backoff(operation, Transient, "busy", max_retries=3, base_delay=0)

    assert result == "ok"
    assert len(attempts) == 3


@pytest.mark.unit
def test_retry_gives_up_after_max_retries():
    attempts = []

    def operation():
        attempts.append(1)
        raise Transient()

    with pytest.raises(Transient):
        _retry_with_backoff(operation, Transient, "busy", max_retries=2, base_delay=0)
    assert len(attempts) == 2


@pytest.mark.unit
def test_retry_does_not_catch_other_errors():
    attempts = []

    def operation():
        attempts.append(1)
        raise KeyError("bad request")

    with pytest.raises(KeyError):
        _retry_with_backoff(operation, Transient, "busy", max_retries=5, base_delay=0)
    assert len(attempts) == 1


class EchoProvider(LLMProvider):
    _provider_prefix = "echo"
    _retryable_exception = Transient
    _retry_message = "echo busy"

    def __init__(self, model: str = "v1"):
        self.update_model(model)

    def _call_api(self, prompt: str) -> LLMResponse:
        return LLMResponse(content=prompt.upper(), model=self.model)


@pytest.mark.unit
def test_provider_name_tracks_model():
    provider = EchoProvider()
    assert provider.name == "echo/v1"

    provider.update_model("v2")
    assert provider.name == "echo/v2"
    assert provider.generate("hi").content == "HI"


@pytest.mark.unit
def test_get_provider_unknown_name():
    with pytest.raises(ValueError, match="Unknown provider"):
        get_provider("carrier-pigeon")
