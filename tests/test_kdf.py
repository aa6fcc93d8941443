from edes.kdf_km import (
    KDF_DEFAULT_PARAMS,
    derive_key,
    derive_key_sha256,
    generate_key,
    generate_salt,
)


# Cheap Argon2id parameters so the tests stay fast
FAST = {'time_cost': 1, 'memory_cost': 64, 'parallelism': 1}


def test_sha256_key_matches_digest():
    key = derive_key_sha256("correct horse battery staple")
    assert key.hex() == "c4bbcb1fbec99d65bf59d85c8cb62ee2db963f0fe106f483d9afa73bd4e39a8a"


def test_sha256_str_and_bytes_agree():
    assert derive_key_sha256("pässword") == derive_key_sha256("pässword".encode("utf-8"))


def test_argon2id_is_deterministic_per_salt():
    salt = bytes(range(16))
    first = derive_key("passphrase", salt, **FAST)
    assert len(first) == 32
    assert first == derive_key(b"passphrase", salt, **FAST)
    assert first != derive_key("passphrase", bytes(16), **FAST)
    assert first != derive_key_sha256("passphrase")


def test_random_material_lengths():
    assert len(generate_salt()) == KDF_DEFAULT_PARAMS['salt_len']
    assert len(generate_salt(24)) == 24
    assert len(generate_key()) == 32
    assert generate_key() != generate_key()
