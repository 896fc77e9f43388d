from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.rules_ports import RulesPortAdapter
from src.rules.loader import load_rules, resolve_rules_path
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path.cwd()
        self.rules_path = resolve_rules_path()


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


def get_rules_port(rules: Rules = Depends(get_rules)) -> RulesPortAdapter:
    return RulesPortAdapter(rules)
