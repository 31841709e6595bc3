import logging

import pytest

from cachematrix._internal.config import Settings


def test_defaults_when_environment_is_empty():
    s = Settings(environ={})
    assert s.invert_method == "auto"
    assert s.tol is None
    assert s.log_level == logging.WARNING


def test_values_are_parsed():
    s = Settings(
        environ={
            "CACHEMATRIX_INVERT_METHOD": " SVD ",
            "CACHEMATRIX_TOL": "1e-10",
            "CACHEMATRIX_LOG_LEVEL": "debug",
        }
    )
    assert s.invert_method == "svd"
    assert s.tol == 1e-10
    assert s.log_level == logging.DEBUG


def test_blank_values_fall_back_to_defaults():
    s = Settings(environ={"CACHEMATRIX_INVERT_METHOD": "  ", "CACHEMATRIX_TOL": ""})
    assert s.invert_method == "auto"
    assert s.tol is None


@pytest.mark.parametrize(
    "name, raw",
    [
        ("INVERT_METHOD", "cholesky"),
        ("TOL", "tiny"),
        ("TOL", "-1"),
        ("TOL", "nan"),
        ("LOG_LEVEL", "loud"),
    ],
)
def test_invalid_values_name_the_variable(name, raw):
    s = Settings(environ={"CACHEMATRIX_" + name: raw})
    with pytest.raises(ValueError) as exc:
        getattr(s, name.lower())
    assert "CACHEMATRIX_" + name in str(exc.value)


def test_values_are_cached_until_reload():
    env = {"CACHEMATRIX_INVERT_METHOD": "qr"}
    s = Settings(environ=env)
    assert s.invert_method == "qr"

    env["CACHEMATRIX_INVERT_METHOD"] = "lu"
    assert s.invert_method == "qr"

    s.reload()
    assert s.invert_method == "lu"


def test_custom_prefix():
    s = Settings(environ={"MYAPP_TOL": "0.5"}, prefix="MYAPP_")
    assert s.tol == 0.5
