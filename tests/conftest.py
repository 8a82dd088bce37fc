from pathlib import Path

import pytest

TESTDATA = Path(__file__).resolve().parent / 'testdata'

_STRING_INI = """; last modified 1 April 2001 by John Doe
[owner]
name = John Doe
organization = Acme Widgets Inc.

[database]
; use IP address in case network name resolution is not working
server = 192.0.2.62
port = 143
[section]
key0 = val0    
key1 = val1"""

_EXPECTED_NORMAL = {
    "owner": {"name": "John Doe", "organization": "Acme Widgets Inc."},
    "database": {"server": "192.0.2.62", "port": "143"},
    "section": {"key0": "val0", "key1": "val1"},
}


@pytest.fixture
def string_ini() -> str:
    return _STRING_INI


@pytest.fixture
def expected_normal() -> dict[str, dict[str, str]]:
    return {k: v.copy() for k, v in _EXPECTED_NORMAL.items()}


@pytest.fixture
def testdata() -> Path:
    return TESTDATA


@pytest.fixture
def ini_path(testdata: Path) -> Path:
    return testdata / 'file.ini'
