"""Pytest configuration and shared fixtures for trackheat tests."""

import pytest
import sys
import tempfile
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from trackheat.track import Track, Trackpoint


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def diagonal_track():
    """Two points at opposite corners of a unit square, one segment."""
    track = Track()
    track.add_point(Trackpoint(0.0, 0.0, 0))
    track.add_point(Trackpoint(1.0, 1.0, 1))
    return track


@pytest.fixture
def sample_track_text():
    """Track text with two segments and one malformed line."""
    return (
        "0.0 0.0 0\n"
        "0.5 0.5 10\n"
        "\n"
        "not a point\n"
        "1.0 1.0 20\n"
        "1.0 0.0 30\n"
    )


@pytest.fixture
def sample_track_file(temp_dir, sample_track_text):
    """Write the sample track to a file."""
    path = temp_dir / "track.txt"
    path.write_text(sample_track_text)
    return str(path)


@pytest.fixture
def mock_config_file(temp_dir):
    """Create a mock configuration file."""
    config_path = temp_dir / "trackheat.yaml"
    config = {
        "heatmap": {
            "width": 4,
            "height": 3,
            "alphabet": ".o#",
            "bucket_size": 2,
        }
    }

    import yaml
    with open(config_path, 'w') as f:
        yaml.dump(config, f)

    return str(config_path)
