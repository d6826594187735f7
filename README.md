# duoauth

A small library for reading the INI-style configuration files that
two-factor login tools keep their integration keys and settings in.
Because such files hold secrets, the reader refuses any file that group
or others can read.

## Installing

    pip install duoauth

To run the test suite:

    pip install "duoauth[test]"
    pytest

## Reading a configuration file

`duoauth.config.parse_config(filename, callback)` opens the file as
UTF-8 and calls `callback(section, name, value)` once for every setting,
in file order.

```python
from duoauth.config import ConfigError, ConfigPermissionError, parse_config

settings = {}

def collect(section, name, value):
    if section != "duo":
        return False
    settings[name] = value
    return True

try:
    parse_config("login.conf", collect)
except ConfigPermissionError as exc:
    print("fix the file mode:", exc)
except ConfigError as exc:
    print("bad line", exc.lineno)
```

### File format

- `[name]` starts a section; settings before any section header get the
  section name `""`.
- A setting is `name = value` or `name : value`; surrounding whitespace
  is removed from both.
- Lines starting with `;` or `#` are comments, and a `;` preceded by
  whitespace starts a comment at the end of a value.
- Blank lines are ignored, as is a byte-order mark at the start of the
  file.

### Errors

- If the file cannot be opened, the `OSError` from opening it is raised.
- If the file is readable by group or others, `ConfigPermissionError`
  (a subclass of `ConfigError`) is raised before anything is parsed.
- A section header without a closing `]`, a line with no `=` or `:`, or
  an entry for which the callback returns `False` counts as a bad line.
  Parsing continues past bad lines, and at the end `ConfigError` is
  raised; its `lineno` attribute holds the number of the first bad line.

## What this package does not do

It only reads configuration. It does not contact an authentication
server, prompt users for a second factor, or perform a login; a program
that does those things has to supply them itself and can use
`parse_config` to load its settings.