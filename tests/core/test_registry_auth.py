"""Tests for registry credentials and auth-carrying options."""

import base64
import json

from podman_api.core.opts import ImagePushOpts, PullOpts, RegistryAuth


def _decode(header: str) -> dict:
    return json.loads(base64.urlsafe_b64decode(header.encode("ascii")))


class TestRegistryAuth:
    def test_credentials_use_remote_keys(self):
        auth = RegistryAuth.credentials("alice", "s3cret", server_address="registry.local")
        assert _decode(auth.serialize()) == {
            "username": "alice",
            "password": "s3cret",
            "serveraddress": "registry.local",
        }

    def test_token(self):
        assert _decode(RegistryAuth.token("tok").serialize()) == {"identitytoken": "tok"}

    def test_serialization_is_url_safe(self):
        auth = RegistryAuth.credentials("user", "??>>??>>")
        assert "+" not in auth.serialize()
        assert "/" not in auth.serialize()


class TestAuthOpts:
    def test_without_auth(self):
        opts = PullOpts.builder().reference("alpine").build()
        assert opts.auth_header() is None
        assert opts.serialize() == "reference=alpine"

    def test_auth_travels_beside_query(self):
        auth = RegistryAuth.token("tok")
        opts = ImagePushOpts.builder().tls_verify(False).auth(auth).build()

        assert opts.serialize() == "tlsVerify=false"
        assert opts.auth == auth
        assert _decode(opts.auth_header()) == {"identitytoken": "tok"}

    def test_equality_includes_auth(self):
        base = PullOpts.builder().reference("alpine")
        assert base.build() == base.build()
        assert base.build() != base.clone().auth(RegistryAuth.token("x")).build()
