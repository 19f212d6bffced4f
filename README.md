# alertsink

`alertsink` delivers alert messages to several output channels. It also has
two runtime helpers: a timeout watchdog and a writer for periodic capture
statistics.

## Installation

```
pip install alertsink
```

## Messages and outputs

`alertsink.outputs` defines the shared types.

An alert is a `Message`. It has these fields:

- `ts`: a timestamp in nanoseconds
- `priority`: a `Priority`
- `msg`: the rendered text
- `rule`: the rule name
- `source`: the event source
- `fields`: the output fields
- `tags`: the tags

`Priority` is an `IntEnum` whose values are the syslog levels, from
`EMERGENCY` (0) to `DEBUG` (7). `Priority.parse(name)` looks up a priority by
name and ignores case. An unknown name raises `OutputError`. The `label`
property gives the capitalised name, for example `Warning`.

Every channel subclasses the abstract `Output`. To build one, pass:

- an `OutputConfig`, which holds a `name` and a dictionary of string `options`
- `buffered`: whether output is buffered
- `hostname`
- `json_output`: whether the text is JSON

The `name` property returns the name from the configuration.

| Class           | Module                     | Options used                  |
|-----------------|----------------------------|-------------------------------|
| `FileOutput`    | `alertsink.file_output`    | `filename`, `keep_alive`      |
| `ProgramOutput` | `alertsink.program_output` | `program`, `keep_alive`       |
| `StdoutOutput`  | `alertsink.stdout_output`  | none                          |
| `SyslogOutput`  | `alertsink.syslog_output`  | none                          |
| `GrpcOutput`    | `alertsink.grpc_output`    | none; pushes to `get_queue()` |

Each channel handles a message as follows:

- **`FileOutput`** appends each message as a line to `filename`. If the file
  cannot be opened, it raises `OutputError`.
- **`ProgramOutput`** runs `program` through the shell and writes each message
  as a line to its standard input. If the program closes its input, it raises
  `OutputError`.
- **`StdoutOutput`** prints each message as a line. When the output is
  unbuffered, it flushes after every message.
- **`SyslogOutput`** sends each message to syslog at the message's priority,
  without a trailing newline.

Unless `keep_alive` is `"true"`, the file and program outputs close after each
message. `reopen()` closes the output and opens it again. `cleanup()` flushes
or closes it.

```python
from alertsink.outputs import OutputConfig, Message, Priority
from alertsink.file_output import FileOutput

out = FileOutput(OutputConfig("file", {"filename": "alerts.log", "keep_alive": "true"}),
                 buffered=False, hostname="host1", json_output=False)
out.output(Message(ts=0, priority=Priority.WARNING, msg="suspicious exec",
                   rule="Exec", source="syscall"))
out.cleanup()
```

### Queued responses

`GrpcOutput` turns each message into a `Response` and pushes it onto the
process-wide `ResponseQueue` returned by `get_queue()`. A `Response` holds:

- the timestamp, split into `time_seconds` and `time_nanos`
- the priority
- the rule
- the output text
- the source
- the hostname
- the output fields
- the tags, sorted

`Source.parse` maps the source name onto the `Source` enum: `SYSCALL`,
`K8S_AUDIT`, `INTERNAL` or `PLUGIN`. An unknown name becomes `Source.PLUGIN`.
The result is stored in `source_deprecated`.

Consumers drain the queue with `get_queue().try_pop()`. It returns `None`
when the queue is empty.

This package does not include a network server that streams these responses
to clients. It only fills the queue.

## Watchdog

`alertsink.watchdog.Watchdog` runs a background thread. The thread checks the
deadline every `resolution` seconds; the default is 0.1.

- `set_timeout(timeout, payload)` sets a deadline. When the deadline passes,
  the thread calls your callback once with `payload`.
- Each new `set_timeout()` replaces the previous deadline.
- `cancel_timeout()` disarms the watchdog.
- `stop()` ends the thread and discards any pending timeout. Leaving a `with`
  block also calls `stop()`.

```python
from alertsink.watchdog import Watchdog

with Watchdog() as wd:
    wd.start(print, 0.1)
    wd.set_timeout(0.5, "event took too long")
```

## Capture statistics

`alertsink.stats.StatsFileWriter(inspector, filename, interval_msec, environ=None)`
appends lines of capture statistics to `filename`. It opens the file as soon as
the writer is created.

The `inspector` is any object with a `get_capture_stats()` method that returns
a `CaptureStats` (`events`, `drops`, `preemptions`).

The writer works like this:

- `start()` starts a timer that marks a sample as due every `interval_msec`. An
  interval of zero disables the timer.
- `request_sample()` marks a sample as due by hand.
- `handle()` is meant to be called often. It writes a line only when a sample
  is due.

Each line holds the following, and ends with a comma:

- the sample number
- the current counts
- the change since the previous sample
- `drop_pct`

Entries in `environ` (default: the process environment) whose keys start with
`FALCO_STATS_EXTRA_` are added to every line. The prefix is removed from the
key.

`close()` stops the timer and closes the file. Leaving a `with` block also
calls `close()`.

## What this package does not include

There is no HTTP output channel. There is no command-line program. There is no
webhook or health-check server. The package is a library of output channels
and helpers, and you call it from your own code.