from __future__ import annotations

from src.matching_pairs_game.app.state import GameState, Settings
from src.matching_pairs_game.services import config_loader


class TestRuntimeConfig:
    def test_defaults_without_config(self):
        assert config_loader.get_app_title("既定") == "既定"
        assert config_loader.load_default_settings() == Settings()

    def test_uploaded_toml(self):
        data = (
            'title = "単語ペア"\n'
            "[timing]\n"
            "victory_delay_ms = 100\n"
            'mismatch_clear_ms = "fast"\n'
            "save_notice_ms = true\n"
            "[storage]\n"
            'path = "/tmp/pairs-store.json"\n'
        ).encode("utf-8")
        assert config_loader.set_runtime_toml_bytes(data)
        assert config_loader.get_app_title() == "単語ペア"
        settings = config_loader.load_default_settings()
        assert settings.victory_delay_ms == 100
        assert settings.mismatch_clear_ms == Settings.mismatch_clear_ms
        assert settings.save_notice_ms == Settings.save_notice_ms
        assert settings.storage_path is None
        assert config_loader.get_runtime_storage_path() == "/tmp/pairs-store.json"

    def test_invalid_toml_clears_config(self):
        config_loader.set_runtime_config({"title": "old"})
        assert not config_loader.set_runtime_toml_bytes(b"title = = broken")
        assert config_loader.get_app_title("既定") == "既定"

    def test_game_state_picks_up_settings(self):
        config_loader.set_runtime_config({"timing": {"victory_duration_ms": 1000}})
        assert GameState().settings.victory_duration_ms == 1000

    def test_new_session_ignores_uploaded_storage_path(self):
        config_loader.set_runtime_config({"storage": {"path": "/tmp/other-session.json"}})
        assert GameState().settings.storage_path is None
