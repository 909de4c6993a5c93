"""
Test suite for application settings.

System role: Verification of environment loading and startup validation
"""

import pytest

from manual_assistant.configs import get_settings, load_settings, require_credentials
from manual_assistant.core.exceptions import ConfigurationError


class TestLoadSettings:
    """Test suite for load_settings."""

    def test_load_should_apply_defaults(self, clean_env) -> None:
        """Unset values fall back to documented defaults."""
        # Act
        settings = load_settings()

        # Assert
        assert settings.retrieval.chunk_size == 1000
        assert settings.retrieval.chunk_overlap == 200
        assert settings.retrieval.top_k == 3
        assert settings.retrieval.similarity_threshold == 0.6
        assert settings.llm.embedding_model == "models/gemini-embedding-001"
        assert settings.log_level == "WARNING"
        assert [source.label for source in settings.documents.sources] == ["USER", "OPERATOR"]

    def test_load_should_read_prefixed_environment(self, clean_env) -> None:
        """Each settings group reads its own prefix."""
        # Arrange
        clean_env.setenv("RETRIEVAL_TOP_K", "5")
        clean_env.setenv("MANUALS_OPERATOR_MANUAL_PATH", "/srv/manuals/operator.pdf")
        clean_env.setenv("LOG_LEVEL", "debug")

        # Act
        settings = load_settings()

        # Assert
        assert settings.retrieval.top_k == 5
        assert settings.documents.sources[1].path == "/srv/manuals/operator.pdf"
        assert settings.log_level == "DEBUG"

    def test_load_should_read_dotenv_file(self, clean_env, tmp_path) -> None:
        """Values in .env are used when the environment is silent."""
        # Arrange
        clean_env.delenv("RETRIEVAL_SIMILARITY_THRESHOLD")
        (tmp_path / ".env").write_text("RETRIEVAL_SIMILARITY_THRESHOLD=0.85\n")

        # Act
        settings = load_settings()

        # Assert
        assert settings.retrieval.similarity_threshold == 0.85

    def test_load_should_prefer_explicit_overrides(self, clean_env) -> None:
        """Overrides win over the environment."""
        settings = load_settings(retrieval={"similarity_threshold": 0.3}, log_level="INFO")

        assert settings.retrieval.similarity_threshold == 0.3
        assert settings.log_level == "INFO"

    def test_load_should_require_threshold(self, clean_env) -> None:
        """The similarity threshold has no default."""
        # Arrange
        clean_env.delenv("RETRIEVAL_SIMILARITY_THRESHOLD")

        # Act & Assert
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()
        assert exc_info.value.details["setting"] == "similarity_threshold"

    @pytest.mark.parametrize("threshold", ["1.5", "-2", "high"])
    def test_load_should_reject_invalid_threshold(self, clean_env, threshold: str) -> None:
        """Thresholds must be numbers in [-1, 1]."""
        clean_env.setenv("RETRIEVAL_SIMILARITY_THRESHOLD", threshold)

        with pytest.raises(ConfigurationError):
            load_settings()

    def test_load_should_reject_overlap_not_below_size(self, clean_env) -> None:
        """chunk_overlap must be smaller than chunk_size."""
        with pytest.raises(ConfigurationError, match="chunk_overlap"):
            load_settings(retrieval={"chunk_size": 100, "chunk_overlap": 100})

    def test_load_should_reject_unknown_log_level(self, clean_env) -> None:
        """Log level must be a logging level name."""
        with pytest.raises(ConfigurationError):
            load_settings(log_level="LOUD")

    def test_get_settings_should_cache_instance(self, clean_env) -> None:
        """Settings are loaded once per process."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestRequireCredentials:
    """Test suite for require_credentials."""

    def test_require_should_return_api_key(self, clean_env) -> None:
        """The key is returned as plain text."""
        assert require_credentials(load_settings()) == "test-key"

    @pytest.mark.parametrize("value", [None, "   "])
    def test_require_should_fail_without_api_key(self, clean_env, value) -> None:
        """Missing or blank keys stop startup."""
        # Arrange
        if value is None:
            clean_env.delenv("GOOGLE_API_KEY")
        else:
            clean_env.setenv("GOOGLE_API_KEY", value)

        # Act & Assert
        with pytest.raises(ConfigurationError) as exc_info:
            require_credentials(load_settings())
        assert exc_info.value.details["setting"] == "GOOGLE_API_KEY"

    def test_require_should_accept_prefixed_key(self, clean_env) -> None:
        """LLM_GOOGLE_API_KEY is accepted as an alternative name."""
        clean_env.delenv("GOOGLE_API_KEY")
        clean_env.setenv("LLM_GOOGLE_API_KEY", "prefixed-key")

        assert require_credentials(load_settings()) == "prefixed-key"


class TestEffectiveLogLevel:
    """Test suite for BaseSettings.effective_log_level."""

    def test_level_should_follow_log_level_by_default(self, clean_env) -> None:
        """Without debug mode the configured level is used."""
        settings = load_settings(log_level="ERROR")

        assert settings.effective_log_level == "ERROR"

    def test_level_should_be_debug_in_debug_mode(self, clean_env) -> None:
        """DEBUG=true forces DEBUG logging."""
        # Arrange
        clean_env.setenv("DEBUG", "true")

        # Act
        settings = load_settings(log_level="ERROR")

        # Assert
        assert settings.debug is True
        assert settings.effective_log_level == "DEBUG"
