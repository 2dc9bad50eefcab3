import json
import os
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"

CLOCK_POLICIES = ("clamp", "strict")


class GeneratorConfig:
    __slots__ = ("entropy", "clock_policy", "max_batch")
    
    def __init__(self, entropy="mixed", clock_policy="clamp", max_batch=100):
        if clock_policy not in CLOCK_POLICIES:
            raise ValueError(f"clock_policy must be one of {CLOCK_POLICIES}, got {clock_policy!r}")
        self.entropy = entropy
        self.clock_policy = clock_policy
        self.max_batch = max_batch


class ServerConfig:
    __slots__ = ("host", "port")
    
    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class AuthConfig:
    __slots__ = ("username", "password")

    def __init__(self, username=None, password=None):
        # TODO: drop the admin123 fallback once deployments always set API_PASSWORD
        self.username = username if username is not None else os.environ.get("API_USERNAME", "admin")
        self.password = password if password is not None else os.environ.get("API_PASSWORD", "admin123")


class LoggingConfig:
    __slots__ = ("level", "crash_file")
    
    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        self.level = level
        self.crash_file = crash_file


class Config:
    __slots__ = ("generator", "server", "auth", "logging")
    
    def __init__(self, generator=None, server=None, auth=None, logging=None):
        self.generator = generator or GeneratorConfig()
        self.server = server or ServerConfig()
        self.auth = auth or AuthConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig(**d.get("generator", {})),
            ServerConfig(**d.get("server", {})),
            AuthConfig(**d.get("auth", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG
    
    if not config_path.exists():
        return Config()
    
    with open(config_path) as file:
        return Config.from_dict(json.load(file))
