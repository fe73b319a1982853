import json

import pytest

SAMPLE = {
    "functions": [
        {
            "id": 0,
            "size": 36,
            "args": "32s",
            "name": "startState",
            "codeBlock": "Begin",
            "namedValues": [],
        },
        {
            "id": 1,
            "size": 4,
            "args": "",
            "name": "endState",
            "codeBlock": "End",
        },
        {
            "id": 0x12,
            "size": 12,
            "args": "ii",
            "name": "setState",
            "codeBlock": "NoBlock",
            "namedValues": [
                [[0, 3], [0, "kStateIdle"]],
                [[0, 4], [0, "kStateRun"]],
                [[1, -1], [1, "kNone"]],
            ],
        },
        {
            "id": 0x13,
            "size": 20,
            "args": "i",
            "name": "",
            "codeBlock": "BeginJumpEntry",
        },
        {
            "id": 0x12,
            "size": 8,
            "args": "i",
            "name": "setStateAlias",
            "codeBlock": "NoBlock",
        },
    ]
}


@pytest.fixture
def sample():
    return json.loads(json.dumps(SAMPLE))


@pytest.fixture
def db_dir(tmp_path, sample):
    d = tmp_path / "static_db"
    d.mkdir()
    (d / "bbcf.json").write_text(json.dumps(sample), encoding="utf-8")
    return d
