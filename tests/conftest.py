"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import pytest
import yaml

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def sample_items() -> list[dict]:
    """Items of a typical registration form"""
    return [
        {"name": "csrf_token", "position": "first"},
        {"name": "email", "position": {"after": "username"}},
        {"name": "username"},
        {"name": "password", "position": {"after": "email"}},
        {"name": "terms"},
        {"name": "submit", "position": "last"},
    ]


@pytest.fixture
def sample_order() -> list[str]:
    """Resolved order of sample_items"""
    return ["csrf_token", "username", "email", "password", "terms", "submit"]


@pytest.fixture
def sample_items_file(tmp_path: Path, sample_items: list[dict]) -> Path:
    """Item document written as YAML"""
    path = tmp_path / "form.yaml"
    path.write_text(yaml.safe_dump({"items": sample_items}, sort_keys=False))
    return path


@pytest.fixture
def circular_items_file(tmp_path: Path) -> Path:
    """Item document whose before positions loop"""
    path = tmp_path / "circular.yaml"
    path.write_text(
        yaml.safe_dump(
            [
                {"name": "a", "position": {"before": "b"}},
                {"name": "b", "position": {"before": "a"}},
            ]
        )
    )
    return path
