# sighook

Unix signal handling where signal subscriptions are a structured resource. Parts of a
program subscribe to signals on their own, and each part can give up its own
subscription without disturbing the others. Several actions may be registered for the
same signal.

## Modules

- `sighook.consts`: signal numbers for the running platform (`SIGTERM`, `SIGUSR1`,
  and so on), `TERM_SIGNALS` (the signals that commonly ask for shutdown) and
  `FORBIDDEN` (the signals that may not be registered).
- `sighook.low_level`: `register` and `unregister` for arbitrary actions, with
  `SigId` as the handle, plus `raise_signal`, `abort` and `exit`.
- `sighook.signal_details`: `signal_name` and `emulate_default_handler`.
- `sighook.channel`: `Channel`, a bounded queue with `SLOTS` (five) slots. It never
  blocks and drops values silently when it is full.
- `sighook.exfiltrator`: the `Exfiltrator` interface, which decides what is recorded
  for each delivered signal, and `SignalOnly`, which records only the signal number.

## Registering actions

```python
import threading

from sighook.consts import SIGUSR1
from sighook.low_level import raise_signal, register, unregister

received = threading.Event()
sig_id = register(SIGUSR1, received.set)
raise_signal(SIGUSR1)
assert received.is_set()

unregister(sig_id)  # True; a second call returns False
```

The first registration for a signal installs a dispatching handler. On each delivery
that handler calls the Python handler that was installed before it, if that handler
could be called, and then every registered action in the order it was registered. The
stock `SIGINT` handler counts as the default and is not called.

`register` raises `ValueError` for a signal in `FORBIDDEN` and `OSError` (`EINVAL`)
for a number that is not a valid signal. `raise_signal` raises `OSError` (`EINVAL`)
for an invalid signal. `exit(status)` ends the process at once without running exit
hooks. `abort()` aborts the process.

## Signal names and default behaviour

```python
from sighook.consts import SIGKILL, SIGTERM
from sighook.signal_details import signal_name

signal_name(SIGKILL)   # "SIGKILL"
signal_name(SIGTERM)   # "SIGTERM"
signal_name(128)       # None
```

`emulate_default_handler(sig)` does what the default disposition of `sig` would do.
For an ignored signal such as `SIGCHLD` or `SIGWINCH` it does nothing. For a stopping
signal it raises `SIGSTOP`. For a terminating signal it restores the default handler,
unblocks the signal, raises it, and aborts if the process is still running after that.
A signal not in its table raises `OSError` with `EINVAL`.

## Channel

```python
from sighook.channel import Channel

channel = Channel()
for i in range(10):
    channel.send(i)        # values 5..9 are dropped, the channel is full
[channel.recv() for _ in range(6)]   # [0, 1, 2, 3, 4, None]
```

`None` means "nothing available", so it should not be sent.

## Exfiltrators

```python
from sighook.consts import SIGUSR1
from sighook.exfiltrator import SignalOnly

ex = SignalOnly()
slot = ex.new_slot()
ex.store(slot, SIGUSR1)
ex.store(slot, SIGUSR1)       # collated with the first delivery
ex.load(slot, SIGUSR1)        # SIGUSR1
ex.load(slot, SIGUSR1)        # None
```

A custom exfiltrator subclasses `Exfiltrator` and implements `new_slot`,
`supports_signal`, `store` and `load`. `init` may also be overridden. `store` runs
inside a signal handler, so neither `store` nor `load` may take a lock.

## What the package does not do

The package has no self-pipe helpers and no signal iterator. There is nothing that
writes to a socket when a signal arrives, and nothing that blocks waiting for signals
or hands them out in batches. To get delivered signals to another part of a program,
register your own actions, for example ones that store into an exfiltrator slot or a
`Channel`, and read those from your own loop.

## Limitations

- `SIGKILL` and `SIGSTOP` cannot be handled. Registering any signal in
  `sighook.consts.FORBIDDEN` raises `ValueError`.
- Once an action is registered for a signal, the default action is replaced. It is
  not restored when all actions are removed. Use `emulate_default_handler` to act as
  the default would.
- Python runs signal handlers in the main thread, between bytecode instructions, so
  registered actions run there too.