import json
from pathlib import Path

from core.errors import InvalidParameter
from slugs.encoder import SAMPLING_MODES
from slugs.precision import Precision

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class SlugConfig:
    __slots__ = ("default_length", "max_batch", "sampling")

    def __init__(self, default_length=16, max_batch=1000, sampling="modulo"):
        Precision.from_length(default_length)
        if isinstance(max_batch, bool) or not isinstance(max_batch, int) or max_batch < 1:
            raise InvalidParameter("max_batch must be a positive integer", name="max_batch", value=max_batch)
        if sampling not in SAMPLING_MODES:
            raise InvalidParameter(
                f"unknown sampling mode {sampling!r}",
                name="sampling",
                value=sampling,
                allowed=SAMPLING_MODES,
            )
        self.default_length = default_length
        self.max_batch = max_batch
        self.sampling = sampling


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level", "file", "crash_file")

    def __init__(self, level="INFO", file="logs/slugs.log", crash_file="logs/crash.log"):
        self.level = level
        self.file = file
        self.crash_file = crash_file


class Config:
    __slots__ = ("slugs", "server", "logging")

    def __init__(self, slugs=None, server=None, logging=None):
        self.slugs = slugs or SlugConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            SlugConfig(**d.get("slugs", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
