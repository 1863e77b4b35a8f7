"""Tests for Eonix package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_eonix() -> None:
    """Import eonix package succeeds."""
    import eonix

    assert hasattr(eonix, "__version__")
    assert eonix.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import eonix.core submodule succeeds."""
    from eonix import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import eonix.units submodule succeeds."""
    from eonix import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import eonix.format submodule succeeds."""
    from eonix import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import eonix.convert submodule succeeds."""
    from eonix import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import eonix.arithmetic submodule succeeds."""
    from eonix import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_internal_module() -> None:
    """Import eonix._internal submodule succeeds."""
    from eonix import _internal

    assert hasattr(_internal, "__all__")


def test_public_names() -> None:
    """Every name in eonix.__all__ is defined."""
    import eonix

    for name in eonix.__all__:
        assert hasattr(eonix, name), name


def test_error_hierarchy() -> None:
    """All Eonix errors derive from EonixError."""
    from eonix import (
        EmptyInputError,
        EonixError,
        InvalidArgumentError,
        InvalidDateError,
    )

    assert issubclass(EonixError, Exception)
    assert issubclass(InvalidDateError, EonixError)
    assert issubclass(EmptyInputError, EonixError)
    assert issubclass(InvalidArgumentError, EonixError)


def test_library_logging_is_silent_by_default() -> None:
    """The package logger carries a NullHandler."""
    import logging

    import eonix  # noqa: F401

    handlers = logging.getLogger("eonix").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
