import os
from dataclasses import dataclass
from pathlib import Path

from blogger_client.types import ConfigError

CREDENTIAL_KEYS = ("BLOGGER_LOGIN_ID", "BLOGGER_PASSWORD", "BLOGGER_AUTH_TOKEN")


@dataclass
class Credentials:
    login_id: str | None = None
    password: str | None = None
    auth_token: str | None = None


def _clean_value(value: str) -> str:
    # Only a matching pair of surrounding quotes is removed.
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _parse_env_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = line.split("=", 1)
    key = key.strip()
    if key.startswith("export "):
        key = key[len("export "):].strip()
    return key, _clean_value(value)


def load_env(path: Path) -> dict[str, str]:
    """Read ``KEY=VALUE`` pairs from a dotenv file; a missing file is empty."""
    if not path.exists():
        return {}
    pairs = (
        _parse_env_line(line)
        for line in path.read_text(encoding="utf-8").splitlines()
    )
    return dict(pair for pair in pairs if pair is not None)


def load_credentials(
    env_path: Path = Path(".env"), environ: dict[str, str] | None = None
) -> Credentials:
    env = os.environ if environ is None else environ
    file_env = load_env(env_path)

    found: dict[str, str | None] = {}
    for key in CREDENTIAL_KEYS:
        value = _clean_value(env.get(key) or file_env.get(key) or "")
        found[key] = value or None

    credentials = Credentials(
        login_id=found["BLOGGER_LOGIN_ID"],
        password=found["BLOGGER_PASSWORD"],
        auth_token=found["BLOGGER_AUTH_TOKEN"],
    )
    if credentials.auth_token:
        return credentials
    if not credentials.login_id or not credentials.password:
        raise ConfigError(
            "Missing BLOGGER_LOGIN_ID/BLOGGER_PASSWORD (or BLOGGER_AUTH_TOKEN) "
            "in the environment or in the .env file."
        )
    return credentials
