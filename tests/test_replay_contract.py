import json

import pytest

from replay_outcome.exceptions import ReplayFormatError
from replay_outcome.replay_contract import (
    DecodedReplay,
    GameStart,
    PortFrames,
    PostFrame,
    StartPlayer,
    load_replay,
    save_replay,
    validate_replay,
)


# ---------------------------------------------------------
# Helpers
# ---------------------------------------------------------

def replay_dict():
    return {
        "start": {
            "is_teams": False,
            "stage": 32,
            "players": [
                {"character": 2, "team_color": None},
                {"character": 20},
                None,
                None,
            ],
        },
        "ports": [
            {"post": [{"stocks": 4, "damage": 0.0}, {"stocks": 1, "damage": 88.5}]},
            {"post": [{"stocks": 4, "damage": 0.0}, {"stocks": 0, "damage": 0.0}]},
            None,
            None,
        ],
        "metadata": {
            "players": {
                "0": {"names": {"code": "FOX#001", "netplay": "fox"}},
                "1": {"names": {"code": "FALC#002", "netplay": "falco"}},
            }
        },
    }


def write_json(path, data):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f)
    return path


# ---------------------------------------------------------
# from_dict
# ---------------------------------------------------------

def test_from_dict_builds_replay():
    replay = DecodedReplay.from_dict(replay_dict())

    assert replay.start.stage == 32
    assert replay.start.is_teams is False
    assert replay.start.player(0) == StartPlayer(character=2, team_color=None)
    assert replay.start.player(2) is None
    assert replay.port(0).last() == PostFrame(stocks=1, damage=88.5)
    assert replay.port(2) is None
    assert replay.port(7) is None


def test_from_dict_defaults():
    replay = DecodedReplay.from_dict({})

    assert replay.start == GameStart()
    assert replay.ports == []
    assert replay.metadata == {}


def test_empty_port_frames_last():
    assert PortFrames().last() is None


# ---------------------------------------------------------
# Validation
# ---------------------------------------------------------

def test_valid_replay_has_no_problems():
    assert validate_replay(DecodedReplay.from_dict(replay_dict())) == []


def test_validation_problems():
    replay = DecodedReplay(
        ports=[
            PortFrames(post=[PostFrame(stocks=-1, damage=0.0)]),
            PortFrames(post=[PostFrame(stocks=300, damage=-5.0)]),
            PortFrames(post=[PostFrame(stocks=1, damage=float("nan"))]),
            None,
            None,
        ],
        metadata=["not", "a", "mapping"],
    )

    problems = validate_replay(replay)

    assert any("too many ports" in p for p in problems)
    assert any("metadata" in p for p in problems)
    assert any("ports[0].post[0]: stocks out of range" in p for p in problems)
    assert any("ports[1].post[0]: stocks out of range" in p for p in problems)
    assert any("ports[1].post[0]: damage < 0" in p for p in problems)
    assert any("ports[2].post[0]: damage not finite" in p for p in problems)


# ---------------------------------------------------------
# IO
# ---------------------------------------------------------

def test_load_replay(tmp_path):
    path = write_json(tmp_path / "game.json", replay_dict())

    replay = load_replay(path)

    assert replay.metadata["players"]["1"]["names"]["netplay"] == "falco"


def test_save_then_load(tmp_path):
    replay = DecodedReplay.from_dict(replay_dict())
    path = tmp_path / "out" / "game.json"

    save_replay(path, replay)

    assert load_replay(path) == replay


def test_load_replay_rejects_non_object(tmp_path):
    path = write_json(tmp_path / "game.json", [1, 2, 3])

    with pytest.raises(ReplayFormatError):
        load_replay(path)


def test_load_replay_rejects_malformed_frame(tmp_path):
    data = replay_dict()
    data["ports"][0]["post"][0] = {"stocks": 4}
    path = write_json(tmp_path / "game.json", data)

    with pytest.raises(ReplayFormatError):
        load_replay(path)


def test_load_replay_rejects_invalid_values(tmp_path):
    data = replay_dict()
    data["ports"][1]["post"][-1]["damage"] = -1.0
    path = write_json(tmp_path / "game.json", data)

    with pytest.raises(ReplayFormatError) as exc:
        load_replay(path)

    assert "damage < 0" in str(exc.value)


@pytest.mark.parametrize("stocks", [0.9, 2.0, "3", True, None])
def test_load_replay_rejects_non_integer_stocks(tmp_path, stocks):
    data = replay_dict()
    data["ports"][0]["post"][-1]["stocks"] = stocks
    path = write_json(tmp_path / "game.json", data)

    with pytest.raises(ReplayFormatError) as exc:
        load_replay(path)

    assert "stocks must be an integer" in str(exc.value)


@pytest.mark.parametrize("is_teams", ["false", "true", 0, 1, None])
def test_load_replay_rejects_non_bool_is_teams(tmp_path, is_teams):
    data = replay_dict()
    data["start"]["is_teams"] = is_teams
    path = write_json(tmp_path / "game.json", data)

    with pytest.raises(ReplayFormatError) as exc:
        load_replay(path)

    assert "is_teams must be true or false" in str(exc.value)


@pytest.mark.parametrize("key, value", [
    ("character", "fox"),
    ("character", 2.5),
    ("team_color", "red"),
])
def test_load_replay_rejects_non_integer_start_ids(tmp_path, key, value):
    data = replay_dict()
    data["start"]["players"][0][key] = value
    path = write_json(tmp_path / "game.json", data)

    with pytest.raises(ReplayFormatError):
        load_replay(path)


def test_load_replay_rejects_non_integer_stage(tmp_path):
    data = replay_dict()
    data["start"]["stage"] = "BATTLEFIELD"
    path = write_json(tmp_path / "game.json", data)

    with pytest.raises(ReplayFormatError):
        load_replay(path)


def test_load_replay_keeps_bool_is_teams(tmp_path):
    data = replay_dict()
    data["start"]["is_teams"] = True
    path = write_json(tmp_path / "game.json", data)

    assert load_replay(path).start.is_teams is True
