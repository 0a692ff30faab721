# sigtalk

sigtalk has two small commands that pass a text message from one process to
another using only POSIX signals. Each byte goes out as eight signals, most
significant bit first. `SIGUSR1` stands for a 0 bit and `SIGUSR2` for a 1 bit.
The server rebuilds the bytes from the bits and writes each finished byte to
standard output.

It runs on POSIX systems only, because it relies on `SIGUSR1` and `SIGUSR2`.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
for signals until you stop it with Ctrl-C, which makes it exit with status 0:

```
$ sigtalk-server
Server started. PID: 4242
```

In another terminal, send a message to that process id:

```
$ sigtalk-client 4242 "hello there"
```

The server's terminal then shows `hello there`. Text is sent as its bytes in
the file-system encoding, so non-ASCII characters arrive as their encoded
bytes. The client waits 0.2 ms after each signal.

The client expects exactly two arguments, a process id and a message. It
checks them as follows, and exits with status 1 in each case:

- No arguments at all: it prints the usage line
  `Start the client like this: ./client PID_NUM MASSAGE`.
- Any other number of arguments than two: it prints `Wrong input`.
- A process id that does not read as a positive number: it prints
  `Wrong PID`.

The process id is read in the lenient `atoi` style. Leading whitespace and one
sign are allowed, and reading stops at the first character that is not a
digit. For example, `"  42abc"` reads as 42.

If the server cannot write a received byte to its output, it exits with
status 1.

## Library use

The pieces can also be used from Python:

- `sigtalk.protocol`
  - `byte_to_bits(byte)` returns the eight bits of a byte, most significant
    first.
  - `message_to_bits(message)` yields the bits of every byte of a `str` or
    `bytes` value.
  - `signal_for_bit(bit)` maps a bit to its signal.
  - `bit_for_signal(signum)` maps a signal back to its bit.
  - `BitDecoder.feed(bit)` collects bits and returns the byte once it has
    eight, or `None` before that.

  These raise `ValueError` for values that are not bits, bytes or the two
  signals.
- `sigtalk.client`
  - `send_byte(pid, byte, delay)` and `send_message(pid, message, delay)`
    signal a process directly. The delay is in seconds and is 0.0002 by
    default.
  - `main(argv)` is the command.
- `sigtalk.server`
  - `Server(output)` takes a binary output stream and uses standard output if
    none is given.
  - `handle_signal(signum, frame)` takes one bit.
  - `install()` registers the handler for both signals.
  - `serve_forever()` waits for signals.
  - `main(argv)` is the command.
- `sigtalk.printf`
  - `format_printf(fmt, *args)` returns the formatted text. It understands
    `%c %s %d %i %u %x %X %p %%`. Integers are wrapped to 32 bits, or to
    64 bits for `%p`. `%s` of `None` gives `(null)`. Unknown conversions
    produce nothing and take no argument. Too few arguments raise
    `TypeError`.
  - `printf(fmt, *args, stream=None)` writes the same text to `stream`, or to
    standard output if none is given, and returns its length.
- `sigtalk.atoi`
  - `parse_int(text)` is the process-id parser.

## What it does not do

There are no acknowledgements from the server and no framing between
messages. If the client sends signals faster than the server can handle them,
signals can be lost, and the bytes that follow are then decoded wrongly. The
server only writes bytes as they complete. It does not mark where one message
ends and the next begins.

## Running the tests

```
pip install ".[test]"
pytest
```