"""Pass text between processes one bit at a time over SIGUSR1 and SIGUSR2.

Includes a signal-sending client, a receiving server, the bit protocol,
a small printf formatter and a lenient integer parser.
"""

__version__ = "0.1.0"