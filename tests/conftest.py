import json

import fitz  # PyMuPDF
import pytest
from fastapi.testclient import TestClient

from completion import get_completion_service
from main import app

SAMPLE_TEXT = (
    "De celmembraan regelt welke stoffen de cel binnenkomen en verlaten. "
    "Mitochondrien produceren ATP, de belangrijkste energiebron van de cel."
)


class FakeCompletionService:
    """Stands in for the OpenAI call; records every prompt it receives."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, prompt, temperature, max_tokens):
        self.calls.append({"prompt": prompt, "temperature": temperature, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return self.reply

    def reply_with(self, payload):
        self.reply = payload if isinstance(payload, str) else json.dumps(payload)


@pytest.fixture
def completion():
    return FakeCompletionService()


@pytest.fixture
def client(completion):
    app.dependency_overrides[get_completion_service] = lambda: completion
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_pdf(pages, title=None):
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    if title:
        doc.set_metadata({"title": title})
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def pdf_bytes():
    return make_pdf(["Hoofdstuk 1: celbiologie", "Hoofdstuk 2: genetica"], title="Biologie")


@pytest.fixture
def pdf_factory():
    return make_pdf
