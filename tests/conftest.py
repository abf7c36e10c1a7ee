"""
Pytest configuration and fixtures for svg_values.

Provides:
- Isolation of the svg_values logger between tests
- svgwrite drawing fixture
- Sample points and path commands
- Temporary output paths
"""

import logging
from pathlib import Path
from typing import List

import numpy as np
import pytest
import svgwrite

from svg_values.logging_config import PACKAGE_LOGGER
from svg_values.values.path import ClosePath, LineTo, MoveTo, PathCommand

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


# ============================================================================
# Logging Isolation
# ============================================================================

@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers/propagation installed by setup_logging in a test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


# ============================================================================
# Drawing Fixtures
# ============================================================================

@pytest.fixture
def drawing() -> svgwrite.Drawing:
    """In-memory SVG document (validation off, as for real output)."""
    return svgwrite.Drawing(size=("100mm", "100mm"), debug=False)


@pytest.fixture
def tmp_svg_path(tmp_path: Path) -> Path:
    """Temporary path for SVG output."""
    return tmp_path / "output.svg"


# ============================================================================
# Geometry Fixtures
# ============================================================================

@pytest.fixture
def square_points() -> np.ndarray:
    """Unit square scaled to 10, integer coordinates, counter-clockwise."""
    return np.array([[0, 0], [10, 0], [10, 10], [0, 10]])


@pytest.fixture
def square_commands() -> List[PathCommand]:
    """Closed square as absolute commands with integer coordinates."""
    return [
        MoveTo(True, 0, 0),
        LineTo(True, 10, 0),
        LineTo(True, 10, 10),
        LineTo(True, 0, 10),
        ClosePath(),
    ]
