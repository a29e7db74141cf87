"""Interface packages only group modules and re-export nothing."""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    "package",
    ["src.adapters.interface", "src.adapters.interface.streamlit"],
)
def test_interface_packages_export_nothing(package: str) -> None:
    module = import_module(package)

    assert module.__all__ == []
    assert module.__doc__
