"""Send a text message to a server process one bit per signal."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence

from sigtalk.atoi import parse_int
from sigtalk.printf import printf
from sigtalk.protocol import byte_to_bits, signal_for_bit

DEFAULT_DELAY = 0.0002


def send_byte(pid: int, byte: int, delay: float = DEFAULT_DELAY) -> None:
    """Send the eight bits of *byte* to *pid*, pausing *delay* seconds after each."""
    for bit in byte_to_bits(byte):
        os.kill(pid, signal_for_bit(bit))
        time.sleep(delay)


def send_message(pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Send every byte of *message* to *pid*."""
    data = os.fsencode(message) if isinstance(message, str) else bytes(message)
    for byte in data:
        send_byte(pid, byte, delay)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: arguments are PID and MESSAGE."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        printf("Start the client like this: ./client PID_NUM MASSAGE\n")
        return 1
    if len(args) != 2:
        printf("Wrong input\n")
        return 1
    pid = parse_int(args[0])
    if pid <= 0:
        printf("Wrong PID\n")
        return 1
    send_message(pid, args[1])
    return 0