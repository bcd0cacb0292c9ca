import datetime
import io
import logging
import pathlib

import numpy as np
import pytest


LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport to the item so fixtures can see the outcome in teardown.
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def capture_test_logs(request):
    """Buffer earclip log records per test and write them to a file only
    when the test fails."""
    root = logging.getLogger()
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    try:
        yield
    finally:
        root.removeHandler(handler)
        rep = getattr(request.node, "rep_call", None)
        if rep is not None and rep.outcome == "failed" and buf.getvalue():
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            LOG_DIR.mkdir(exist_ok=True)
            with open(LOG_DIR / "{}__{}.log".format(nodeid, ts), "w", encoding="utf-8") as f:
                f.write("=== Test: {}\n\n".format(request.node.nodeid))
                f.write(buf.getvalue())


@pytest.fixture
def l_shape():
    # CCW L-shape; vertex 3 is the only reflex corner
    return np.array([
        [0.0, 0.0],  # 0
        [2.0, 0.0],  # 1
        [2.0, 1.0],  # 2
        [1.0, 1.0],  # 3 reflex
        [1.0, 2.0],  # 4
        [0.0, 2.0],  # 5
    ])


@pytest.fixture
def unit_square():
    return np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])


@pytest.fixture
def bowtie():
    # edges 0-1 and 2-3 cross at (1, 1)
    return np.array([[0.0, 0.0], [2.0, 2.0], [2.0, 0.0], [0.0, 2.0]])


def random_star_polygon(n, seed):
    """Simple star-shaped polygon around the origin, counter-clockwise."""
    rng = np.random.default_rng(seed)
    angles = np.sort(rng.uniform(0.0, 2.0 * np.pi, size=n))
    radii = rng.uniform(0.5, 1.5, size=n)
    return np.column_stack((radii * np.cos(angles), radii * np.sin(angles)))


@pytest.fixture
def star_polygon():
    return random_star_polygon
