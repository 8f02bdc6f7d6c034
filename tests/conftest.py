import base64
import json

import pytest
from dependency_injector import providers

from app.config import CredentialResolver
from app.container import container
from app.main import app
from app.prompt.service import PromptService

TEN_BYTES = bytes(range(10))


class StubGenerator:
    """업스트림 모델 대신 쓰는 stub. 호출 내역을 기록한다."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate(self, media, instruction_text, temperature):
        self.calls.append((media, instruction_text, temperature))
        if self.error is not None:
            raise self.error
        return self.text


class StubGeneratorFactory:
    def __init__(self, generator):
        self.generator = generator
        self.api_keys = []

    def __call__(self, *, api_key):
        self.api_keys.append(api_key)
        return self.generator


def make_body(raw: bytes = TEN_BYTES, mime_type: str = "video/mp4", **extra) -> dict:
    body = {"video": {"data": base64.b64encode(raw).decode("ascii"), "mimeType": mime_type}}
    body.update(extra)
    return body


def encode_body(body) -> bytes:
    return json.dumps(body).encode("utf-8")


@pytest.fixture
def stub_generator():
    return StubGenerator(text="  A cat.  ")


@pytest.fixture
def generator_factory(stub_generator):
    return StubGeneratorFactory(stub_generator)


@pytest.fixture
def environ():
    return {"GEMINI_API_KEY": "test-key"}


@pytest.fixture
def prompt_service(generator_factory, environ):
    return PromptService(
        credential_resolver=CredentialResolver(environ=environ),
        generator_factory=generator_factory,
    )


@pytest.fixture
def wired_app(prompt_service):
    with container.prompt_service.override(providers.Object(prompt_service)):
        yield app
