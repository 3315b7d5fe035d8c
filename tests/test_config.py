import pytest

from bfi.config import DEFAULT_TAPE_SIZE, MAX_TAPE_SIZE, EofPolicy, InterpreterConfig
from bfi.errors import BrainfuckError, ConfigError


class TestDefaults:
    def test_defaults(self):
        config = InterpreterConfig()
        assert config.eof_policy is EofPolicy.ZERO
        assert config.step_limit is None
        assert config.tape_size == DEFAULT_TAPE_SIZE

    def test_from_empty_env(self):
        assert InterpreterConfig.from_env({}) == InterpreterConfig()


class TestFromEnv:
    def test_reads_all_variables(self):
        config = InterpreterConfig.from_env({
            "BF_EOF_POLICY": "Unchanged",
            "BF_STEP_LIMIT": "250",
            "BF_TAPE_SIZE": "64",
        })
        assert config.eof_policy is EofPolicy.UNCHANGED
        assert config.step_limit == 250
        assert config.tape_size == 64

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("BF_EOF_POLICY", "max")
        monkeypatch.delenv("BF_STEP_LIMIT", raising=False)
        monkeypatch.delenv("BF_TAPE_SIZE", raising=False)
        assert InterpreterConfig.from_env().eof_policy is EofPolicy.MAX

    def test_bad_policy(self):
        with pytest.raises(ConfigError, match="Unknown EOF policy"):
            InterpreterConfig.from_env({"BF_EOF_POLICY": "minus-one"})

    def test_bad_integer(self):
        with pytest.raises(ConfigError, match="BF_STEP_LIMIT"):
            InterpreterConfig.from_env({"BF_STEP_LIMIT": "lots"})

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            InterpreterConfig.from_env({"BF_TAPE_SIZE": "x"})
        assert issubclass(ConfigError, BrainfuckError)


class TestValidation:
    def test_negative_step_limit(self):
        with pytest.raises(ConfigError):
            InterpreterConfig(step_limit=-1)

    def test_empty_tape(self):
        with pytest.raises(ConfigError):
            InterpreterConfig(tape_size=0)


class TestOverrides:
    def test_none_keeps_value(self):
        base = InterpreterConfig(step_limit=10)
        assert base.with_overrides(step_limit=None, eof_policy=None) == base

    def test_string_policy_is_parsed(self):
        config = InterpreterConfig().with_overrides(eof_policy="max", tape_size=8)
        assert config.eof_policy is EofPolicy.MAX
        assert config.tape_size == 8

    def test_overrides_are_validated(self):
        with pytest.raises(ConfigError):
            InterpreterConfig().with_overrides(tape_size=-5)

    def test_tape_size_upper_bound(self):
        with pytest.raises(ConfigError, match="at most"):
            InterpreterConfig(tape_size=MAX_TAPE_SIZE + 1)

    def test_tape_size_at_bound_is_accepted(self):
        assert InterpreterConfig(tape_size=MAX_TAPE_SIZE).tape_size == MAX_TAPE_SIZE
