"""Pytest configuration and shared fixtures."""

from typing import Dict, List

import pytest

from contrastlab.core.types import RGBColor
from contrastlab.main import main


@pytest.fixture
def white() -> RGBColor:
    return RGBColor(255, 255, 255)


@pytest.fixture
def black() -> RGBColor:
    return RGBColor(0, 0, 0)


@pytest.fixture
def seven_color_palette() -> Dict[str, List[str]]:
    """Three near-identical reds plus four colors far from everything else."""
    return {
        "similar": ["#ff0000", "#fe0000", "#fd0101"],
        "distinct": ["#000000", "#ffffff", "#0000ff", "#00ff00"],
    }


@pytest.fixture
def run_cli(capsys):
    """Run the CLI with an argument list, returning (exit code, stdout, stderr)."""
    def runner(*argv: str):
        with pytest.raises(SystemExit) as exc_info:
            main(list(argv))
        captured = capsys.readouterr()
        return exc_info.value.code, captured.out, captured.err
    return runner
