"""Receive messages sent one bit per signal and write them to an output."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Sequence
from types import FrameType
from typing import BinaryIO

from sigtalk.printf import printf
from sigtalk.protocol import BitDecoder, bit_for_signal


class Server:
    """Decodes SIGUSR1/SIGUSR2 signals into bytes written to *output*."""

    def __init__(self, output: BinaryIO | None = None) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.decoder = BitDecoder()

    def handle_signal(self, signum: int, frame: FrameType | None) -> None:
        """Take one bit from *signum*; write the byte once it is complete."""
        byte = self.decoder.feed(bit_for_signal(signum))
        if byte is None:
            return
        try:
            self.output.write(bytes([byte]))
            self.output.flush()
        except OSError:
            raise SystemExit(1) from None

    def install(self) -> None:
        """Register this server as the handler for SIGUSR1 and SIGUSR2."""
        signal.signal(signal.SIGUSR1, self.handle_signal)
        signal.signal(signal.SIGUSR2, self.handle_signal)

    def serve_forever(self) -> None:
        """Wait for signals indefinitely."""
        while True:
            signal.pause()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: print the PID and receive messages until interrupted."""
    server = Server()
    server.install()
    try:
        printf("Server started. PID: %d\n", os.getpid())
    except OSError:
        return 1
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0