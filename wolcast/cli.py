from __future__ import annotations

"""Command-line front-end.

Run: wolcast -m aa:bb:cc:dd:ee:ff -b 192.168.1.255
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import ConfigError, find_host, load_hosts, read_environment
from .errors import PacketError, ParseError, TransmitError, WolError
from .log import logger, setup_logging
from .mac import parse_mac
from .packet import build_magic_packet
from .transmit import TargetEndpoint, send_packet


class UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


class _Once(argparse.Action):
    """Store a value, refusing a second occurrence of the option."""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest) is not None:
            parser.error(f"option {option_string} given more than once")
        setattr(namespace, self.dest, values)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    ap = _Parser(prog=prog, description="Send a Wake-on-LAN magic packet", add_help=False, allow_abbrev=False)
    ap.add_argument("-m", "--mac", action=_Once, help="MAC address in the form FF:FF:FF:FF:FF:FF")
    ap.add_argument("-b", "--bcast", action=_Once, help="broadcast address")
    ap.add_argument("--host", action=_Once, help="take MAC and broadcast address from the hosts file")
    ap.add_argument("--hosts", type=Path, action=_Once, help="hosts file (default: $WOLCAST_HOSTS or hosts.yml)")
    ap.add_argument("--env-file", type=Path, default=None, help="dotenv file with WOLCAST_* defaults (default: .env)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("-h", "--help", action="store_true", help="display this help")
    return ap


def run(argv: List[str], prog: Optional[str] = None) -> int:
    parser = build_parser(prog)
    usage = parser.format_help()

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"could not parse args: {e}")
        return 1

    if args.help:
        print(usage)
        return 0

    env = read_environment(args.env_file)
    setup_logging(env.log_file, logging.DEBUG if args.verbose else logging.WARNING)

    mac_text, bcast_text = args.mac, args.bcast
    if args.host:
        try:
            host = find_host(load_hosts(args.hosts or env.hosts_path), args.host)
        except ConfigError as e:
            print(f"could not load hosts: {e}")
            return 1
        if host is None:
            print(f"unknown host: {args.host}")
            return 1
        mac_text = mac_text or host.mac
        bcast_text = bcast_text or host.broadcast_ip

    # A missing MAC or broadcast address is treated as a help request.
    if mac_text is None:
        print(usage)
        return 0
    try:
        mac = parse_mac(mac_text)
    except ParseError as e:
        print(f"could not parse mac: {type(e).__name__}: {e}")
        return 1

    if bcast_text is None:
        print(usage)
        return 0
    try:
        endpoint = TargetEndpoint.from_string(bcast_text)
    except WolError as e:
        print(f"could not parse ip: {e}")
        return 1

    try:
        packet = build_magic_packet(mac)
    except PacketError as e:
        print(f"could not build packet: {type(e).__name__}: {e}")
        return 1

    try:
        send_packet(packet, endpoint)
    except (TransmitError, PacketError) as e:
        logger.debug("Send to %s:%d failed", endpoint.address, endpoint.port, exc_info=True)
        print(f"could not send request: {e}")
        return 1

    logger.info("Sent WoL to %s via %s:%d", mac, endpoint.address, endpoint.port)
    print("packet sent Ok")
    return 0


def main() -> None:
    try:
        sys.exit(run(sys.argv[1:]))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
