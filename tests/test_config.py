import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from bottleplan import config


def test_missing_conf_file_yields_defaults(tmp_path):
    cfg = config.load_config(tmp_path / "absent.conf", env={})

    assert cfg == config.PlannerConfig()
    assert cfg.confirm_max_attempts is None
    assert cfg.show_progress is True


def test_conf_file_values_are_parsed(tmp_path):
    conf = tmp_path / "bottleplan.conf"
    conf.write_text(
        "# comment\n"
        "NO_INSTALLED_DEPENDENTS_CHECK=yes\n"
        "no_install_upgrade = 1\n"
        "ASK=true\n"
        "SIZE_OUTDATED_DEPENDENCIES=on\n"
        "CONFIRM_MAX_ATTEMPTS=4\n"
        f"CATALOG={tmp_path / 'catalog.json'}\n"
        "SHOW_PROGRESS=false\n"
        "garbage line\n",
        encoding="utf-8",
    )

    cfg = config.load_config(conf, env={})

    assert cfg.no_installed_dependents_check is True
    assert cfg.no_install_upgrade is True
    assert cfg.ask is True
    assert cfg.developer is False
    assert cfg.size_outdated_dependencies is True
    assert cfg.confirm_max_attempts == 4
    assert cfg.catalog == tmp_path / "catalog.json"
    assert cfg.show_progress is False


def test_environment_overrides_conf_file(tmp_path):
    conf = tmp_path / "bottleplan.conf"
    conf.write_text("ASK=yes\nDEVELOPER=no\n", encoding="utf-8")

    cfg = config.load_config(
        conf,
        env={"BOTTLEPLAN_ASK": "0", "BOTTLEPLAN_DEVELOPER": "1", "UNRELATED": "1"},
    )

    assert cfg.ask is False
    assert cfg.developer is True


def test_invalid_attempt_limit_falls_back_to_unbounded(tmp_path, caplog):
    for value in ("three", "0", "-2"):
        cfg = config.load_config(tmp_path / "absent.conf", env={"BOTTLEPLAN_CONFIRM_MAX_ATTEMPTS": value})
        assert cfg.confirm_max_attempts is None

    assert "CONFIRM_MAX_ATTEMPTS" in caplog.text


def test_load_conf_ignores_comments_and_blank_lines(tmp_path):
    conf = tmp_path / "c.conf"
    conf.write_text("\n# ASK=yes\nCATALOG = /srv/catalog.json \n", encoding="utf-8")

    assert config.load_conf(conf) == {"CATALOG": "/srv/catalog.json"}


def test_unrecognised_boolean_keeps_default_and_warns(tmp_path, caplog):
    cfg = config.load_config(
        tmp_path / "absent.conf",
        env={"BOTTLEPLAN_SHOW_PROGRESS": "flase", "BOTTLEPLAN_ASK": "perhaps", "BOTTLEPLAN_DEVELOPER": "off"},
    )

    assert cfg.show_progress is True
    assert cfg.ask is False
    assert cfg.developer is False
    assert "SHOW_PROGRESS" in caplog.text
    assert "ASK" in caplog.text
    assert "DEVELOPER" not in caplog.text
