"""Shared fixtures: a small pricing configuration and matching requests."""

import copy
from pathlib import Path

import pytest


BASE_CONFIG = {
    "project_management": 0.15,
    "contingency": 0.10,
    "calibration_factor": 1.05,
    "day_rate": {"min": 800, "max": 1200},
    "project_types": {
        "web_app": {"days": 20, "title": "Web app", "description": "Browser application"},
        "mobile_app": {"days": 25, "title": "Mobile app", "description": "Phone application"},
        "api": {"days": 15, "title": "API", "description": "Headless service"},
    },
    "features": {
        "authentication": {"days": 3, "title": "Authentication", "description": "Accounts and login"},
        "payment_integration": {"days": 4, "title": "Payments", "description": "Card payments"},
        "reporting": {"days": 2, "title": "Reporting", "description": "Dashboards"},
    },
    "bundles": {"max_quantity": 50, "days_per_bundle": 0.5, "description": "Extra pages"},
    "multipliers": {
        "complexity": {"simple": 0.8, "medium": 1.0, "complex": 1.3},
        "risk": {"low": 0.9, "medium": 1.0, "high": 1.2},
        "speed": {"normal": 1.0, "fast": 1.2, "rush": 1.5},
        "discovery": {"yes": 1.05, "no": 1.0},
        "support": {"yes": 1.1, "no": 1.0},
        "compliance": {"basic": 1.0, "advanced": 1.15, "enterprise": 1.3},
        "real_time": {"yes": 1.1, "no": 1.0},
    },
}

BASE_REQUEST = {
    "projectType": "web_app",
    "features": ["authentication"],
    "bundles": 2,
    "complexity": "medium",
    "risk": "low",
    "speed": "normal",
    "discovery": "no",
    "support": "no",
}

SAMPLE_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "pricing.json"


@pytest.fixture
def pricing_config():
    """A valid pricing configuration; safe to mutate per test."""
    return copy.deepcopy(BASE_CONFIG)


@pytest.fixture
def base_request():
    """Request for the 22.7-day worked example."""
    return copy.deepcopy(BASE_REQUEST)


@pytest.fixture
def sample_config_path():
    """Path of the configuration shipped in data/."""
    return SAMPLE_CONFIG_PATH
