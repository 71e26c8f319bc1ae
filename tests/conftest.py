import pytest

from tracing import retrace_strokes


@pytest.fixture
def retrace():
    return retrace_strokes
