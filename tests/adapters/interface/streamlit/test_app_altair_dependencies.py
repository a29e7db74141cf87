"""Tests for the chart dependency check of the dashboard."""

import sys
import types

import pytest

from src.adapters.interface.streamlit import app


def _install(monkeypatch, numpy_attrs: dict, pandas_attrs: dict) -> None:
    monkeypatch.setitem(
        sys.modules,
        "numpy",
        types.SimpleNamespace(**numpy_attrs),
    )
    monkeypatch.setitem(
        sys.modules,
        "pandas",
        types.SimpleNamespace(**pandas_attrs),
    )


def test_usable_numpy_and_pandas_pass(monkeypatch) -> None:
    _install(monkeypatch, {"ndarray": object}, {"Timestamp": object})

    assert app._check_altair_dependencies() == (True, None)


@pytest.mark.parametrize(
    ("numpy_attrs", "pandas_attrs", "broken", "attribute"),
    [
        ({}, {"Timestamp": object}, "numpy", "ndarray"),
        ({"ndarray": object}, {}, "pandas", "Timestamp"),
    ],
)
def test_incomplete_module_is_named_in_message(
    monkeypatch,
    numpy_attrs,
    pandas_attrs,
    broken,
    attribute,
) -> None:
    _install(monkeypatch, numpy_attrs, pandas_attrs)

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert message.startswith(f"{broken} is incomplete")
    assert attribute in message


def test_import_failure_is_reported(monkeypatch) -> None:
    def _fail(name):
        raise ImportError(f"broken build of {name}")

    monkeypatch.setattr(app.importlib, "import_module", _fail)

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert message == "numpy could not be imported: broken build of numpy"
