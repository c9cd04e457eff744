"""
Smoke tests to verify basic infrastructure setup.
Run these after fresh environment setup to confirm everything works.
"""

import sys
import importlib
from pathlib import Path
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def test_python_version():
    """Test Python version meets requirements."""
    assert sys.version_info >= (3, 10), f"Python 3.10+ required, got {sys.version}"


def test_package_imports():
    """Test that configured packages can be imported."""
    packages = [
        "numpy",
        "numba",
        "psutil",
        "pytest",
    ]

    failed_imports = []
    for package in packages:
        try:
            importlib.import_module(package)
        except ImportError as e:
            failed_imports.append(f"{package}: {e}")

    if failed_imports:
        pytest.fail(f"Failed to import packages: {failed_imports}")


def test_project_structure():
    """Test that required directories exist."""
    required_dirs = [
        "life_engines",
        "life_engines/core",
        "tests",
        "scripts",
    ]

    missing_dirs = [d for d in required_dirs if not (PROJECT_ROOT / d).is_dir()]

    if missing_dirs:
        pytest.fail(f"Missing required directories: {missing_dirs}")


def test_source_package():
    """Test that the package exposes its public API."""
    import life_engines

    assert life_engines.__version__ == "0.1.0"
    for name in life_engines.__all__:
        assert hasattr(life_engines, name), f"{name} missing from life_engines"


def test_tool_config_files():
    """Test that tool configuration files exist."""
    configs = [
        "pyproject.toml",
    ]

    missing_configs = [c for c in configs if not (PROJECT_ROOT / c).exists()]

    if missing_configs:
        pytest.fail(f"Missing configuration files: {missing_configs}")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
