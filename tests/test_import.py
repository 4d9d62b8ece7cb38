"""Basic import tests to verify package structure."""


def test_import_dripsim():
    """Verify main package imports."""
    import dripsim
    assert dripsim.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from dripsim import core
    assert hasattr(core, "__doc__")
    assert "WaterSimulation" in core.__all__


def test_import_viz():
    """Verify viz module structure exists."""
    from dripsim import viz
    assert hasattr(viz, "__doc__")
    assert "compute_tiles" in viz.__all__
