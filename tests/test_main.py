import io
import json
import random

import skirmish.main as main_module
from skirmish.components.game_state import GamePhase
from skirmish.factories import PlayerProfile


def test_config_error_exits_with_code_two(tmp_path, capsys):
    path = tmp_path / "crowded.json"
    path.write_text(json.dumps({"width": 2, "height": 2, "enemy_count": 9}), encoding="utf-8")

    code = main_module.main(["--config", str(path)])

    assert code == main_module.EXIT_CONFIG_ERROR
    assert "bigger than free cells" in capsys.readouterr().err


def test_missing_config_exits_with_code_two(tmp_path):
    assert main_module.main(["--config", str(tmp_path / "absent.json")]) == 2


def test_name_flag_skips_character_prompts(tmp_path, monkeypatch):
    calls = {}

    def fake_run(config, *, rng=None, input_fn=None, out=None, profile=None):
        calls["config"] = config
        calls["profile"] = profile
        calls["roll"] = rng.random()
        return GamePhase.QUIT

    monkeypatch.setattr(main_module, "run_console_game", fake_run)
    save_path = tmp_path / "run.bin"

    code = main_module.main(
        ["--name", "Hero", "--health", "120", "--damage", "40", "--seed", "5", "--save-path", str(save_path)]
    )

    assert code == main_module.EXIT_OK
    assert calls["profile"] == PlayerProfile(name="Hero", health=120, armor=0, damage=40)
    assert calls["config"].save_path == save_path
    assert calls["roll"] == random.Random(5).random()


def test_without_name_the_profile_is_prompted(monkeypatch):
    seen = []

    def fake_run(config, *, rng=None, input_fn=None, out=None, profile=None):
        seen.append(profile)
        return GamePhase.QUIT

    monkeypatch.setattr(main_module, "run_console_game", fake_run)

    assert main_module.main([]) == 0
    assert seen == [None]


def test_end_of_input_at_the_name_prompt_exits_cleanly(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert main_module.main([]) == main_module.EXIT_OK
