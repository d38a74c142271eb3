# minidrive

Client-side building blocks for a small remote file drive: reading the
client's command line, writing a log, remembering unfinished uploads and
downloads so they can be resumed, working with remote paths, and handling
what is typed at an interactive prompt.

It uses only the Python standard library and supports Python 3.10 and
later.

## What this package does not do

minidrive has no network code. It does not connect to a server, speak a
wire protocol, authenticate, or move file data, and it has no server of
its own. It installs no command to run. The modules below are the pieces
a drive client is built from, not a finished client.

## Modules

### `minidrive.config`

`parse_arguments(argv=None)` turns a list of arguments (program name
excluded; `sys.argv[1:]` when `argv` is `None`) into a `ClientConfig`
with the fields `host`, `port`, `username`, `log_path`,
`max_upload_rate` and `max_download_rate`.

The first argument is the endpoint, written `[username@]host:port`.
Without `username@`, `username` stays `None`. These options may follow:

| Option                      | Sets                |
|-----------------------------|---------------------|
| `--log <file>`              | `log_path`          |
| `--max-upload-rate <bps>`   | `max_upload_rate`   |
| `--max-download-rate <bps>` | `max_download_rate` |

`ConfigError` (a `ValueError`) is raised for an empty argument list, an
endpoint without `:`, a port or rate that is not a number, an option
without its value, or an unknown option.

```python
from minidrive.config import parse_arguments

config = parse_arguments(["alice@localhost:9000", "--max-upload-rate", "65536"])
assert config.username == "alice" and config.port == 9000
```

### `minidrive.logger`

`Logger(path)` writes lines of the form
`YYYY-MM-DD HH:MM:SS [info] [tag] message` to `path`, truncating the
file when it is opened. With `path` set to `None`, or when the file
cannot be opened, nothing is written. `log(tag, *args)` joins its
arguments into the message (booleans as `true`/`false`); `close()`
closes the file. A `Logger` can be used as a context manager.

```python
from minidrive.logger import Logger

with Logger("client.log") as logger:
    logger.log("info", "connected to ", "localhost", ":", 9000)
```

### `minidrive.transfer_state`

`TransferStateStore(state_path=None)` keeps a JSON list of unfinished
transfers, loading it on creation and saving it after every change. Each
record is a `TransferEntry` with `kind` (`"upload"` or `"download"`),
`identity`, `local_path`, `remote_path`, `total_size` and
`bytes_transferred`. Local paths are stored absolute and normalized.
Without `state_path`, `default_state_path()` is used:
`%APPDATA%/MiniDrive/transfers.json` on Windows when set, otherwise
`$HOME/.minidrive/transfers.json`, otherwise `.minidrive/transfers.json`.

```python
from minidrive.transfer_state import TransferStateStore

store = TransferStateStore("transfers.json")
store.upsert_upload("alice", "report.pdf", "docs/report.pdf", 4096)
store.update_upload_progress("alice", "report.pdf", "docs/report.pdf", 1024)

for entry in store.pending_for_identity("alice"):
    print(entry.kind, entry.local_path, entry.bytes_transferred)

store.remove_upload("alice", "report.pdf", "docs/report.pdf")
```

`upsert_download` (which also records progress), `update_download_progress`
and `remove_download` do the same for downloads. `discard_identity`
forgets every record of one user. `pending_for_identity` returns copies,
so changing them does not change the store.

### `minidrive.remote_paths`

Purely lexical functions for remote paths, which always use `/`:

- `normalize_remote(path)` collapses separators and `.`/`..` parts; an
  empty result becomes `"."`.
- `resolve_remote_path(cwd, path)` resolves `path` against the remote
  working directory; an empty `path` gives `cwd`, an absolute one
  ignores it.
- `join_remote_path(remote_root, relative)` places `relative` under
  `remote_root`; `""` or `"."` gives `remote_root`.
- `remote_parent_directory(remote_path)` returns the directory that must
  exist before `remote_path` can be created, or `None` when it lies in
  the current directory.

### `minidrive.shell`

Helpers for an interactive prompt:

- `parse_command_line(line)` returns a `ParsedCommand` (`command` upper
  cased, `args` as a tuple), or `None` for a blank line.
- `ask_yes_no(question, read_line=None, write=None)` asks until the
  answer is `y`/`yes` or `n`/`no` (any case); end of input counts as no.
  It reads standard input and writes standard output unless given
  callables.
- `help_text()` returns the help listing below.
- `upload_target(args)` returns the local path and remote target for
  `UPLOAD <local> [remote]`, defaulting the remote to the local file
  name. `download_target(args)` returns the remote path and local target
  for `DOWNLOAD <remote> [local]`, defaulting the local name to the
  remote file name or `downloaded_file`. Both raise `ValueError` with a
  usage message for the wrong number of arguments.
- `rate_limit_delay(rate, nbytes, elapsed)` gives the seconds to wait so
  that `nbytes` stays within `rate` bytes per second;
  `apply_rate_limit(rate, nbytes, start_time)` sleeps that long, measured
  from a `time.monotonic()` start, and returns the delay.
- `partial_download_path(local_path)` is `local_path` with `.part`
  appended.

The text returned by `help_text()`:

```
Available commands:
  HELP                      Show this help
  EXIT                      Disconnect and exit
  LIST [path]               List directory contents
  STAT <path>               Show metadata for a path
  CD <path>                 Change current remote directory
  MKDIR <path>              Create a directory
  RMDIR <path>              Remove an empty directory
  MOVE <src> <dst>          Move or rename an entry
  COPY <src> <dst>          Copy an entry
  DELETE <path>             Delete a file
  UPLOAD <local> [remote]   Upload a file to the server
  DOWNLOAD <remote> [local] Download a file
  SYNC <local> <remote>     Synchronize local directory to remote

Flags:
  --log <file>              Append structured logs to file
  --max-upload-rate <bps>   Throttle uploads (bytes per second)
  --max-download-rate <bps> Throttle downloads (bytes per second)
```

## Tests

```
pip install -e ".[test]"
pytest
```