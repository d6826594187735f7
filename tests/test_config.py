import pytest

from duoauth.config import ConfigError, ConfigPermissionError, parse_config


def _write(tmp_path, text, mode=0o600):
    path = tmp_path / "duo.conf"
    path.write_text(text)
    path.chmod(mode)
    return path


def _collect(path):
    entries = []
    parse_config(path, lambda section, name, value: entries.append((section, name, value)))
    return entries


def test_entries_are_delivered_in_order(tmp_path):
    path = _write(
        tmp_path,
        "; leading comment\n"
        "[duo]\n"
        "ikey = integration-id\n"
        "host: api.example.com\n"
        "# another comment\n"
        "pushinfo = yes ; trailing note\n",
    )
    assert _collect(path) == [
        ("duo", "ikey", "integration-id"),
        ("duo", "host", "api.example.com"),
        ("duo", "pushinfo", "yes"),
    ]


def test_entries_before_any_section_have_empty_section(tmp_path):
    path = _write(tmp_path, "autopush = true\n[other]\nfailmode = safe\n")
    assert _collect(path) == [("", "autopush", "true"), ("other", "failmode", "safe")]


def test_group_readable_file_is_refused(tmp_path):
    path = _write(tmp_path, "[duo]\nhost = api.example.com\n", mode=0o640)
    with pytest.raises(ConfigPermissionError):
        _collect(path)


def test_world_readable_file_is_a_config_error(tmp_path):
    path = _write(tmp_path, "[duo]\nhost = api.example.com\n", mode=0o604)
    with pytest.raises(ConfigError):
        _collect(path)


def test_missing_file_raises_os_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        _collect(tmp_path / "absent.conf")


def test_rejected_entry_reports_its_line_and_parsing_continues(tmp_path):
    path = _write(tmp_path, "[duo]\ngood = 1\nbad = 2\nlater = 3\n")
    seen = []

    def callback(section, name, value):
        seen.append(name)
        return name != "bad"

    with pytest.raises(ConfigError) as info:
        parse_config(path, callback)
    assert info.value.lineno == 3
    assert seen == ["good", "bad", "later"]


def test_line_without_separator_is_an_error(tmp_path):
    path = _write(tmp_path, "[duo]\nhost = api.example.com\nnonsense\n")
    with pytest.raises(ConfigError) as info:
        _collect(path)
    assert info.value.lineno == 3


def test_unclosed_section_is_an_error(tmp_path):
    path = _write(tmp_path, "[duo\nhost = api.example.com\n")
    with pytest.raises(ConfigError) as info:
        _collect(path)
    assert info.value.lineno == 1