import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class GeneratorConfig:
    __slots__ = ("monotonic", "count")

    def __init__(self, monotonic=True, count=1):
        self.monotonic = monotonic
        self.count = count


class BenchConfig:
    __slots__ = ("iterations",)

    def __init__(self, iterations=10000):
        self.iterations = iterations


class LoggingConfig:
    __slots__ = ("level", "crash_file")

    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        self.level = level
        self.crash_file = crash_file


class Config:
    __slots__ = ("generator", "bench", "logging")

    def __init__(self, generator=None, bench=None, logging=None):
        self.generator = generator or GeneratorConfig()
        self.bench = bench or BenchConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig(**d.get("generator", {})),
            BenchConfig(**d.get("bench", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
