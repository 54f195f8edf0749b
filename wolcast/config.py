from __future__ import annotations

import ipaddress
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from dotenv import dotenv_values

from .errors import ParseError
from .mac import parse_mac
from .transmit import BROADCAST

HOSTS_VAR = "WOLCAST_HOSTS"
LOG_FILE_VAR = "WOLCAST_LOG_FILE"


@dataclass(frozen=True)
class Host:
    name: str
    mac: str
    broadcast_ip: str


@dataclass(frozen=True)
class Environment:
    hosts_path: Path
    log_file: Optional[Path]


class ConfigError(Exception):
    pass


def read_environment(env_path: Optional[Path] = None) -> Environment:
    """Resolve CLI defaults from the process environment and a .env file.

    Variables already set in the environment win over the file; the
    environment itself is left untouched.
      - WOLCAST_HOSTS: host book path (default hosts.yml)
      - WOLCAST_LOG_FILE: rotating log file (default: console only)
    """
    if env_path is None:
        env_path = Path(".env")

    values: Dict[str, Optional[str]] = {}
    if env_path.is_file():
        values.update(dotenv_values(env_path))
    values.update(os.environ)

    log_file = values.get(LOG_FILE_VAR)
    return Environment(
        hosts_path=Path(values.get(HOSTS_VAR) or "hosts.yml"),
        log_file=Path(log_file) if log_file else None,
    )


def _host_from_entry(idx: int, entry) -> Host:
    if not isinstance(entry, dict):
        raise ConfigError(f"Host entry #{idx} must be a mapping")
    if "name" not in entry or "mac" not in entry:
        raise ConfigError(f"Host entry #{idx} needs both 'name' and 'mac'")

    name = str(entry["name"]).strip()
    try:
        mac = parse_mac(str(entry["mac"]).strip())
    except ParseError as e:
        raise ConfigError(f"Host {name}: invalid MAC address {entry['mac']!r}") from e

    raw_ip = str(entry.get("broadcast_ip", BROADCAST)).strip()
    try:
        broadcast_ip = ipaddress.IPv4Address(raw_ip)
    except ValueError as e:
        raise ConfigError(f"Host {name}: invalid broadcast address {raw_ip!r}") from e

    return Host(name=name, mac=str(mac), broadcast_ip=str(broadcast_ip))


def load_hosts(hosts_path: Path) -> List[Host]:
    """Read the host book.

    Format::

        hosts:
          - name: pc1
            mac: aa:bb:cc:dd:ee:ff
            broadcast_ip: 192.168.1.255   # optional
    """
    try:
        text = hosts_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(f"Hosts file not found: {hosts_path}") from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {hosts_path}: {e}") from e

    entries = data.get("hosts") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ConfigError(f"{hosts_path} must contain a 'hosts' list")

    hosts = [_host_from_entry(idx, entry) for idx, entry in enumerate(entries)]
    names = [h.name for h in hosts]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        raise ConfigError(f"Duplicate host names: {', '.join(dupes)}")
    return hosts


def find_host(hosts: List[Host], name: str) -> Optional[Host]:
    return next((h for h in hosts if h.name == name), None)
