from pathlib import Path

import pytest

from src.adapters.rules_ports import RulesPortAdapter
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_rules() -> Rules:
    """The real rules.yaml shipped at the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def rules_port(project_rules: Rules) -> RulesPortAdapter:
    return RulesPortAdapter(project_rules)
