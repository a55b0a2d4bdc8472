"""Launching game clients, picking free ports and connecting to the game API."""

from __future__ import annotations

import os
import platform
import socket
import subprocess
import time
from dataclasses import dataclass, field
from pathlib import Path

import websocket

HOST = "127.0.0.1"
REPLAY_SUFFIX = ".SC2Replay"
_PORT_RANGE = range(5000, 65535)
_RETRY_DELAY = 0.05

_X86_64 = {"x86_64", "amd64", "x64"}
_X86 = {"x86", "i386", "i486", "i586", "i686"}
_AARCH64 = {"aarch64", "arm64"}


@dataclass(frozen=True)
class Ports:
    """Ports used by the game server and by every client in a network game."""

    server: tuple[int, int]
    client: list[tuple[int, int]] = field(default_factory=list)


@dataclass
class LaunchOptions:
    """Extra options for running a single game."""

    sc2_version: str | None = None
    save_replay_as: str | None = None
    realtime: bool = False


def _arch(machine: str) -> str:
    name = machine.lower()
    if name in _X86_64:
        return "x86_64"
    if name in _X86:
        return "x86"
    if name in _AARCH64:
        return "aarch64"
    raise ValueError(f"Unsupported Arch: {machine}")


def _os(platform_name: str) -> str:
    name = platform_name.lower()
    if name.startswith("win"):
        return "windows"
    if name == "linux":
        return "linux"
    if name in ("darwin", "macos"):
        return "macos"
    raise ValueError(f"Unsupported OS: {platform_name}")


def _check_wine(os_name: str, wine: bool) -> None:
    if wine and os_name != "linux":
        raise ValueError("Wine is only supported on linux")


def sc2_binary(platform_name: str, machine: str, wine: bool = False) -> str:
    """Return the game executable path, relative to a version directory."""
    os_name = _os(platform_name)
    _check_wine(os_name, wine)
    if os_name == "windows" or wine:
        arch = _arch(machine)
        if arch == "x86_64":
            return "SC2_x64.exe"
        if arch == "x86":
            return "SC2.exe"
        raise ValueError(f"Unsupported Arch: {machine}")
    if os_name == "linux":
        arch = _arch(machine)
        if arch == "x86_64":
            return "SC2_x64"
        if arch == "x86":
            return "SC2"
        raise ValueError(f"Unsupported Arch: {machine}")
    if _arch(machine) == "aarch64":
        return "SC2.app/Contents/MacOS/SC2"
    raise ValueError(f"Unsupported OS: {platform_name} on {machine}")


def _port_is_free(port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((HOST, port))
        except OSError:
            return False
    return True


def get_unused_port() -> int:
    """Return the lowest port from 5000 up that can be bound on the local host."""
    for port in _PORT_RANGE:
        if _port_is_free(port):
            return port
    raise OSError("no unused port found")


def get_unused_ports(n: int) -> list[int]:
    """Return up to ``n`` of the lowest free ports from 5000 up, ascending."""
    ports: list[int] = []
    if n <= 0:
        return ports
    for port in _PORT_RANGE:
        if _port_is_free(port):
            ports.append(port)
            if len(ports) >= n:
                break
    return ports


def ladder_ports(player_port: int) -> Ports:
    """Return the ports a ladder game derives from the player's start port."""
    return Ports(
        server=(player_port + 2, player_port + 3),
        client=[(player_port + 4, player_port + 5)],
    )


def launch_command(
    sc2_path: str,
    port: int,
    base_version: str | int,
    data_hash: str = "",
    wine: bool = False,
) -> tuple[list[str], str]:
    """Return the command line and working directory for starting a game client."""
    system, machine = platform.system(), platform.machine()
    os_name = _os(system)
    binary = sc2_binary(system, machine, wine)
    full_path = f"{sc2_path}/Versions/Base{base_version}/{binary}"

    if wine:
        command = [os.environ.get("WINE", "wine"), full_path]
    else:
        command = [full_path]

    if os_name == "windows" or wine:
        support = "Support64" if _arch(machine) == "x86_64" else "Support"
        cwd = f"{sc2_path}/{support}"
    else:
        cwd = sc2_path

    command += ["-listen", HOST, "-port", str(port), "-displayMode", "0"]
    if data_hash:
        command += ["-dataVersion", data_hash]
    return command, cwd


def _use_wine() -> bool:
    return os.environ.get("SC2_WINE", "").lower() in ("1", "true", "yes")


def launch_client(
    sc2_path: str, port: int, base_version: str | int, data_hash: str = ""
) -> subprocess.Popen:
    """Start a game client listening on ``port`` and return its process."""
    command, cwd = launch_command(sc2_path, port, base_version, data_hash, _use_wine())
    try:
        return subprocess.Popen(command, cwd=cwd)
    except OSError as error:
        raise RuntimeError("Can't launch SC2 process.") from error


def connect_to_websocket(host: str, port: int) -> websocket.WebSocket:
    """Connect to the game API, retrying until the client accepts."""
    url = f"ws://{host}:{port}/sc2api"
    while True:
        try:
            return websocket.create_connection(url)
        except (OSError, websocket.WebSocketException):
            time.sleep(_RETRY_DELAY)


def replay_path(path: str | os.PathLike[str]) -> Path:
    """Return ``path`` with the replay suffix appended when it is missing."""
    text = os.fspath(path)
    if not text.endswith(REPLAY_SUFFIX):
        text += REPLAY_SUFFIX
    return Path(text)


def save_replay(data: bytes, path: str | os.PathLike[str]) -> Path:
    """Write replay data to ``path`` (suffix added if needed) and return the file path."""
    target = replay_path(path)
    target.write_bytes(data)
    return target