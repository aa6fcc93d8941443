import io
import logging

import pytest

from edes.cipher_core import decrypt, encrypt, make_context
from edes.cli.speed import main as speed_main, run_benchmark
from edes.cli.tools import KEY_ENV_VAR, run
from edes.kdf_km import derive_key_sha256


PASSPHRASE = "correct horse battery staple"


class TTYInput(io.BytesIO):
    def isatty(self):
        return True


def _context():
    return make_context(derive_key_sha256(PASSPHRASE))


# ---------------------------------------------------------------------------
# encrypt / decrypt front ends
# ---------------------------------------------------------------------------

def test_file_roundtrip(tmp_path):
    plain = tmp_path / "plain.txt"
    cipher = tmp_path / "plain.enc"
    restored = tmp_path / "plain.dec"
    plain.write_bytes(b"file contents\n" * 40)

    assert run("encrypt", ["-i", str(plain), "-o", str(cipher), "-k", PASSPHRASE]) == 0
    assert cipher.read_bytes() == encrypt(plain.read_bytes(), _context())

    assert run("decrypt", ["-i", str(cipher), "-o", str(restored), "-k", PASSPHRASE]) == 0
    assert restored.read_bytes() == plain.read_bytes()


def test_stdin_to_stdout():
    stdout = io.BytesIO()
    status = run("encrypt", ["-k", PASSPHRASE], stdin=io.BytesIO(b"hello world"), stdout=stdout)
    assert status == 0
    assert stdout.getvalue().hex() == "4e5cbe52ad122b2ce5a4ef81b1f7c92f"


def test_long_output_is_previewed_and_saved(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    stdout = io.BytesIO()
    data = bytes(300)

    assert run("encrypt", ["-k", PASSPHRASE], stdin=io.BytesIO(data), stdout=stdout) == 0

    full = (tmp_path / "enc.out").read_bytes()
    assert len(full) == 304
    assert stdout.getvalue() == full[:256]
    assert decrypt(full, _context()) == data


def test_key_from_environment(monkeypatch):
    monkeypatch.setenv(KEY_ENV_VAR, PASSPHRASE)
    stdout = io.BytesIO()
    assert run("encrypt", [], stdin=io.BytesIO(b"hello world"), stdout=stdout) == 0
    assert stdout.getvalue().hex() == "4e5cbe52ad122b2ce5a4ef81b1f7c92f"


def test_missing_key_is_usage_error(monkeypatch):
    monkeypatch.delenv(KEY_ENV_VAR, raising=False)
    with pytest.raises(SystemExit) as excinfo:
        run("encrypt", [], stdin=io.BytesIO(b"x"), stdout=io.BytesIO())
    assert excinfo.value.code == 2


def test_terminal_without_input_file(capsys):
    status = run("encrypt", ["-k", PASSPHRASE], stdin=TTYInput(), stdout=io.BytesIO())
    assert status == 2
    assert "--input-file" in capsys.readouterr().err


def test_decrypt_bad_length_fails():
    stdout = io.BytesIO()
    status = run("decrypt", ["-k", PASSPHRASE], stdin=io.BytesIO(bytes(5)), stdout=stdout)
    assert status == 1
    assert stdout.getvalue() == b""


def test_missing_input_file_fails(tmp_path):
    status = run("encrypt", ["-i", str(tmp_path / "absent"), "-k", PASSPHRASE],
                 stdin=io.BytesIO(), stdout=io.BytesIO())
    assert status == 1


def test_argon2id_requires_salt():
    with pytest.raises(SystemExit) as excinfo:
        run("encrypt", ["-k", PASSPHRASE, "--kdf", "argon2id"],
            stdin=io.BytesIO(b"x"), stdout=io.BytesIO())
    assert excinfo.value.code == 2


@pytest.mark.parametrize("salt", ["00", "0011223344"])
def test_argon2id_short_salt_is_usage_error(salt, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run("encrypt", ["-k", PASSPHRASE, "--kdf", "argon2id", "--salt", salt],
            stdin=io.BytesIO(b"x"), stdout=io.BytesIO())
    assert excinfo.value.code == 2
    assert "Argon2id key derivation failed" in capsys.readouterr().err


def test_argon2id_rejects_non_hex_salt():
    with pytest.raises(SystemExit) as excinfo:
        run("encrypt", ["-k", PASSPHRASE, "--kdf", "argon2id", "--salt", "not-hex"],
            stdin=io.BytesIO(b"x"), stdout=io.BytesIO())
    assert excinfo.value.code == 2


def test_argon2id_roundtrip():
    args = ["-k", PASSPHRASE, "--kdf", "argon2id", "--salt", "00112233445566778899aabbccddeeff"]
    encrypted = io.BytesIO()
    assert run("encrypt", args, stdin=io.BytesIO(b"salted"), stdout=encrypted) == 0

    decrypted = io.BytesIO()
    assert run("decrypt", args, stdin=io.BytesIO(encrypted.getvalue()), stdout=decrypted) == 0
    assert decrypted.getvalue() == b"salted"
    assert encrypted.getvalue() != encrypt(b"salted", _context())


# ---------------------------------------------------------------------------
# speed benchmark
# ---------------------------------------------------------------------------

def test_run_benchmark():
    result = run_benchmark(iterations=10, buffer_size=64, best_fraction=0.2, seed=1)
    assert result.iterations == 10
    assert result.buffer_size == 64
    assert result.best_count == 2
    assert 0.0 < result.min_ms <= result.best_mean_ms <= result.max_ms
    assert result.to_dict()["best_count"] == 2


def test_run_benchmark_logs_progress(caplog):
    with caplog.at_level(logging.DEBUG, logger="edes.cli.speed"):
        run_benchmark(iterations=3, buffer_size=16, seed=2)

    messages = [record.getMessage() for record in caplog.records if record.name == "edes.cli.speed"]
    assert "Benchmarking 3 iterations over a 16B buffer" in messages
    assert sum(message.startswith("Context ") for message in messages) == 3


@pytest.mark.parametrize("kwargs", [{"iterations": 0}, {"best_fraction": 0.0}, {"best_fraction": 1.5}])
def test_run_benchmark_rejects_bad_parameters(kwargs):
    with pytest.raises(ValueError):
        run_benchmark(**kwargs)


def test_speed_main(capsys):
    assert speed_main(["--iterations", "3", "--size", "16", "--seed", "0"]) == 0
    assert "Finished" in capsys.readouterr().out
