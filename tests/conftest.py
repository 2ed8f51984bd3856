import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.models import Observation
from engine.synthetic import logistic_series


def make_series(*pairs):
    return [Observation(period=p, value=float(v)) for p, v in pairs]


@pytest.fixture
def growing_series():
    """Ten percent per period growth, far from any capacity."""
    return make_series((2010, 1000), (2011, 1100), (2012, 1210), (2013, 1331))


@pytest.fixture
def saturating_series():
    return make_series(
        (2000, 100), (2001, 180), (2002, 310), (2003, 480), (2004, 640),
        (2005, 760), (2006, 830), (2007, 870), (2008, 890), (2009, 898),
    )


@pytest.fixture
def exact_logistic_series():
    # generated by the same recurrence the model fits: r=2.0, K=1000, P0=100
    return logistic_series(2000, 10, 100.0, 2.0, 1000.0)
