from squircle import get_path
from squircle.log import logger_wrapper


def test_wrapper_prefixes_name(log_messages: list[str]):
    logger_wrapper("squircle-test").info("hello")
    assert any(m.endswith("squircle-test | hello") for m in log_messages)


def test_distribution_is_traced(log_messages: list[str]):
    get_path(width=40,
             height=100,
             top_left_corner_radius=40,
             top_right_corner_radius=40,
             corner_smoothing=0.6)
    traced = [m for m in log_messages if "Distribute |" in m]
    assert len(traced) == 4
    assert any("TOP_LEFT: radius 40.0 -> 20.0" in m for m in traced)


def test_uniform_radius_is_logged(log_messages: list[str]):
    get_path(width=100, height=60, corner_radius=40, corner_smoothing=0.6)
    assert any("uniform radius 30.0, budget 30.0" in m for m in log_messages)
