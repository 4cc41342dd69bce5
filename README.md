# toollinux

A small toolkit for looking at a Linux system from Python: a key/value
config file reader, a thread-safe logger, system and CPU information,
and disk usage figures.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Command line

    toollinux [CONFIG]

The command prints `Starting ToolLinux...`, tries to load the config
file `CONFIG` (by default `config/default.cfg`, relative to the current
directory), and then prints either `Config loaded successfully.` or
`Failed to load config file.`. It exits with status 0 in both cases.

## Library use

### Config files

Config files hold `key = value` lines. Surrounding spaces, tabs and
line endings are trimmed; blank lines and lines starting with `#` are
skipped, and lines that do not split into exactly one key and one value
around `=` are ignored. `load` raises `OSError` if the file cannot be
opened.

    from toollinux.config_manager import ConfigManager

    cfg = ConfigManager()
    try:
        cfg.load("config/default.cfg")
    except OSError:
        ...
    level = cfg.get("log_level", "INFO")
    if "log_file" in cfg:          # same as cfg.has_key("log_file")
        ...

A path can also be given to the constructor and `load()` called with no
argument. The module also defines `DEFAULT_CONFIG_FILE` and
`MAX_LOG_LINE_LENGTH`.

### Logging

`Logger` writes lines of the form `[timestamp] [LEVEL] message`. With a
log file, lines are appended to it; without one, or if the file cannot
be opened (a warning then goes to standard error), they go to the
stream passed as `stream`, or to standard output.

    from toollinux.logger import Logger, Level

    with Logger("tool.log") as log:
        log.info("started")
        log.log(Level.WARN, "disk almost full")

The levels are `Level.DEBUG`, `Level.INFO`, `Level.WARN` and
`Level.ERROR`, with the methods `debug`, `info`, `warn` and `error`.
`close()` closes the log file; `to_file` tells whether messages are
still going to it.

### System details

    from toollinux.system_info import os_name, kernel_version, architecture, read_cpu_model

    print(os_name(), kernel_version(), architecture())
    print(read_cpu_model())

On systems other than Linux the first three return `"Unsupported OS"`.
`read_cpu_model` returns the first `model name` entry of
`/proc/cpuinfo` (or of another path given to it), `None` if there is
none, and raises `OSError` if the file cannot be read.

### Disk usage

Sizes in bytes of the filesystem holding a path:

    from toollinux.disk_info import get_disk_info

    info = get_disk_info("/")
    print(info.total_space, info.free_space, info.available_space)

`get_disk_info` raises `OSError` if the filesystem cannot be queried or
the platform has no `statvfs`.

### Other helpers

- `toollinux.string_util`: `trim`, `split` (single-character delimiter,
  trailing empty field dropped), `to_lower`, `to_upper` (ASCII only).
- `toollinux.file_io`: `read_file`, `write_file` (replaces the file's
  contents), `read_lines`.
- `toollinux.data`: the abstract `Model` interface (`predict`, `train`,
  `save_model`, `load_model`) and `Settings.instance()`, a process-wide
  settings object whose `log_level` property defaults to `"INFO"`.

## What it does not do

The package does not scan networks for hosts or list running processes,
and the command does nothing beyond loading its config file. `Model` is
an interface only; no model implementation is included.