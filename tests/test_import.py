"""Verify package imports work correctly."""


def test_import_inkdown() -> None:
    """Test that inkdown can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import inkdown

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert inkdown.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from inkdown import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Every name in __all__ is importable from the package."""
    import inkdown

    for name in inkdown.__all__:
        assert hasattr(inkdown, name), name


def test_block_alias_covers_lists() -> None:
    """Lists are typed through Block; there is no separate list alias."""
    from typing import get_args

    from inkdown import nodes

    members = get_args(nodes.Block.__value__)
    assert nodes.BulletList in members
    assert nodes.OrderedList in members
    assert not hasattr(nodes, "ListNode")
