# pipex

`pipex` runs two commands one after the other, feeding the first from an
input file and writing the second's output to an output file. The result
is what the shell line

```
< infile cmd1 | cmd2 > outfile
```

would produce.

## Installation

```
pip install .
```

## Usage

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

Exactly four arguments are required. For example:

```
pipex input.txt "grep error" "wc -l" count.txt
```

### How commands are found

Each command is split on spaces (runs of spaces give no empty arguments;
there is no quoting). A command that is empty or starts with a space is
reported as not found.

When `PATH` is set, the first word is used as is if it names an existing
file; otherwise each `PATH` directory is tried in order and the first
existing `directory/word` is taken. Only existence is checked. When `PATH`
is not set, the first word is used as is, relative to the working
directory.

### How the two commands run

The first command runs to completion with the input file as its standard
input; its output is collected in a temporary file. The output file is
then created (mode `0777`, less the umask) or truncated, and the second
command runs with the collected output as its standard input.

### Messages and exit status

- With a wrong number of arguments, `You Have Entered Few Arguments Than
  Expected` is printed on standard output and the exit status is 1.
- If the input file cannot be opened, or the first command cannot be found
  or started, a message is printed on standard error and the second
  command still runs, with empty input.
- If the output file cannot be opened, `Error while opening the output
  file: <reason>` is printed on standard error and the exit status is 1.
- If the second command cannot be found, `Error: Command not found` is
  printed; if it is found but cannot be started, `Error: Executing the
  command failed` is printed. Either way the exit status is 1.
- Otherwise the exit status is that of the second command; if it was
  killed by a signal, it is 128 plus the signal number.

## Library use

```python
from pipex.pipeline import resolve_command, run_command, run_pipeline
from pipex.printer import format_message, printf

program, argv = resolve_command("ls -l", {"PATH": "/bin:/usr/bin"})
# ("/bin/ls", ["ls", "-l"]) where /bin/ls exists

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt",
                      {"PATH": "/bin:/usr/bin"})

format_message("%s has %d lines (0x%x)\n", "count.txt", 42, 42)
```

- `pipex.pipeline`: `get_path_from_env`, `find_command_path`,
  `resolve_command`, `run_command`, `run_pipeline`, and the exceptions
  `CommandNotFoundError` and `CommandFailedError`.
- `pipex.printer`: `format_message(template, *args)` and
  `printf(template, *args, stream=None)`, supporting the `c`, `s`, `p`,
  `d`, `i`, `u`, `x`, `X` and `%` conversions with no flags or widths.
  Integers are wrapped to 32 bits (64 for `%p`), `None` prints as
  `(null)` under `%s`, and `printf` returns the number of characters
  written.
- `pipex.textutils`: string helpers `split`, `atoi`, `itoa`, `strtrim`,
  `substr`, `strnstr` and `strncmp`.
- `pipex.cli`: `main(argv=None)`, the `pipex` command.

## Limits

`pipex` handles exactly two commands. It has no here-document mode, no
support for more than two commands, and no shell syntax such as quoting,
globbing or variable expansion. The two commands do not run at the same
time: the second starts only once the first has finished.

## Running the tests

```
pip install ".[test]"
pytest
```