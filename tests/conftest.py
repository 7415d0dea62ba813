import pytest

from mathlayout import FontParameterSet

# A small metrics table: (height, depth, width) in ems
METRICS = {
    "normal": dict(
        [(c, (.44, 0, .5)) for c in "abcdefghijklmnopqrstuvwxyz"] +
        [(c, (.65, 0, .5)) for c in "0123456789"] +
        [
            ("+", (.58, .08, .78)),
            ("=", (.37, -.13, .78)),
            ("(", (.75, .25, .39)),
            (")", (.75, .25, .39)),
            (",", (.1, .19, .28)),
            ("∑", (.75, .25, 1.06)),
            ("¯", (.59, 0, .5)),
        ]
    ),
    "normal-largeop": {
        "∑": (1.0, .5, 1.44),
    },
}


@pytest.fixture
def fontParams():
    return FontParameterSet(metrics=METRICS)
