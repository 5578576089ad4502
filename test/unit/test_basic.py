"""
Basic tests to ensure the package is importable.
"""


def test_import_project():
    """Test that project modules can be imported."""
    import alias_game.client  # noqa: F401
    import alias_game.game  # noqa: F401
    import alias_game.shared  # noqa: F401


def test_version():
    """Test that version info is available."""
    from alias_game import __version__

    assert __version__ == "0.1.0"
    assert isinstance(__version__, str)
