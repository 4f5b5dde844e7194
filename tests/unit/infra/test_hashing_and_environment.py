from __future__ import annotations

"""
Unit tests for keyed hashing and environment resolution.
"""

import hashlib
import hmac as std_hmac
import os

from rotating_log_writer.infra.environment import (
    ENV_ENCRYPTION_KEY,
    ENV_PROJECT_PATH,
    ENV_VAR_PATH,
    Environment,
)
from rotating_log_writer.infra.hashing import hmac


def test_hmac_uses_key_and_additional_secret():
    expected = std_hmac.new(b"keysecret", b"payload", hashlib.sha1).hexdigest()
    assert hmac("payload", "secret", "key") == expected


def test_hmac_depends_on_encryption_key():
    assert hmac("payload", "secret", "a") != hmac("payload", "secret", "b")
    assert len(hmac("payload")) == 40


def test_environment_from_environ(tmp_path):
    env = Environment.from_environ({
        ENV_PROJECT_PATH: str(tmp_path),
        ENV_VAR_PATH: str(tmp_path / "data"),
        ENV_ENCRYPTION_KEY: "s3cret",
    })
    assert env.project_path == str(tmp_path)
    assert env.var_path == str(tmp_path / "data")
    assert env.encryption_key == "s3cret"


def test_environment_defaults_to_cwd():
    env = Environment.from_environ({})
    assert env.project_path == os.path.abspath(os.getcwd())
    assert env.var_path == os.path.join(env.project_path, "var")
    assert env.encryption_key == ""
