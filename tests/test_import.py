"""Verify package imports work correctly."""


def test_import_libhtml() -> None:
    """Test that libhtml can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import libhtml

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert libhtml.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from libhtml import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exports() -> None:
    """Every name in __all__ resolves on the package."""
    import libhtml

    for name in libhtml.__all__:
        assert hasattr(libhtml, name), name
