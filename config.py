import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class DemoConfig:
    __slots__ = ("base_id", "total")

    def __init__(self, base_id=1_000_000_000_000, total=10):
        self.base_id = base_id
        self.total = total


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("demo", "logging")

    def __init__(self, demo=None, logging=None):
        self.demo = demo or DemoConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            DemoConfig(**d.get("demo", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
