"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from datetime import UTC, datetime
from pathlib import Path

# Минимальные переменные окружения для тестов
os.environ.setdefault("BACKEND_BASE_URL", "http://localhost:8000")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

# Добавить корень проекта в PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest


# Fixed evaluation time: 189 whole days after 2024-01-15
NOW = datetime(2024, 7, 22, 12, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """Fixed, timezone-aware evaluation time."""
    return NOW


@pytest.fixture
def sample_payload() -> dict:
    """
    User-data payload as returned by GET /user_data/{id}.

    Plan 50000 paid on 2024-01-15, downline of 3 + 4 + 1 members.
    """
    return {
        "id": "user123",
        "name": "John Doe",
        "planAmount": 50000,
        "joinedDate": "2024-01-15",
        "paymentStatus": True,
        "downline": {
            "level1": [
                {"id": "1", "name": "Alice Smith", "earnings": 5200.00, "joinedDate": "2024-02-01"},
                {"id": "2", "name": "Bob Johnson", "earnings": 3150.25, "joinedDate": "2024-02-15"},
                {"id": "3", "name": "Carol Davis", "earnings": 4850.50, "joinedDate": "2024-03-01"},
            ],
            "level2": [
                {"id": "4", "name": "David Wilson", "earnings": 2100.00, "joinedDate": "2024-03-10"},
                {"id": "5", "name": "Eva Brown", "earnings": 1850.75, "joinedDate": "2024-03-15"},
                {"id": "6", "name": "Frank Miller", "earnings": 2750.25, "joinedDate": "2024-04-01"},
                {"id": "7", "name": "Grace Lee", "earnings": 1950.50, "joinedDate": "2024-04-10"},
            ],
            "level3": [
                {"id": "8", "name": "Henry Clark", "earnings": 1200.00, "joinedDate": "2024-04-15"},
            ],
            "level4": [],
            "level5": [],
            "level6": [],
            "level7": [],
        },
    }
