import pytest

from models import parse_segments


SAMPLE = """0,9 -> 5,9
8,0 -> 0,8
9,4 -> 3,4
2,2 -> 2,1
7,0 -> 7,4
6,4 -> 2,0
0,9 -> 2,9
3,4 -> 1,4
0,0 -> 8,8
5,5 -> 8,2"""


@pytest.fixture
def sample_text():
    return SAMPLE


@pytest.fixture
def sample_segments():
    return parse_segments(SAMPLE)
