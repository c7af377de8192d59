"""Shared test fixtures for signed-codegen."""

import pytest

from signed_codegen.config import CodegenConfig
from signed_codegen.sections import manual_section


class CountingRenderer:
    """Renderer stub that records how often it was invoked."""

    def __init__(self, body: str):
        self.body = body
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return self.body


@pytest.fixture
def config(tmp_path):
    return CodegenConfig(root_dir=tmp_path)


@pytest.fixture
def make_renderer():
    return CountingRenderer


@pytest.fixture
def partial_body():
    return "value = 1\n" + manual_section("extra") + "\n"
