"""
Tests for the signup service: validators, rendering and the two flows.
"""

import pytest

from signup_lab.schemas.signup import SecureSignupRequest, VulnerableSignupRequest
from signup_lab.services.signup_service import (
    SignupResult,
    SignupStatus,
    is_secure_username_valid,
    is_vulnerable_username_valid,
    register_secure_user,
    register_vulnerable_user,
    render_welcome,
    stringify_username,
)

XSS_PAYLOAD = "<script>alert(1)</script>"


class TestValidators:
    """Tests for the forbidden-character predicates."""

    @pytest.mark.parametrize("username", ["alice", "", "a b c", "&amp;", "\"quoted\""])
    def test_safe_strings_pass_both(self, username):
        assert is_secure_username_valid(username)
        assert is_vulnerable_username_valid(username)

    @pytest.mark.parametrize("username", [XSS_PAYLOAD, "<", ">", "x<y", "x>y"])
    def test_forbidden_strings_fail_both(self, username):
        assert not is_secure_username_valid(username)
        assert not is_vulnerable_username_valid(username)

    @pytest.mark.parametrize(
        "username",
        [[XSS_PAYLOAD], {"a": XSS_PAYLOAD}, [["<"]], 1, 0.5, False, None, []],
    )
    def test_vulnerable_validator_accepts_every_non_string(self, username):
        assert is_vulnerable_username_valid(username)


class TestStringifyUsername:
    """Tests for the JSON value → text conversion."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("alice", "alice"),
            ('say "hi"', 'say "hi"'),
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (0, "0"),
            (-7, "-7"),
            (2.5, "2.5"),
            ([XSS_PAYLOAD], XSS_PAYLOAD),
            ([[XSS_PAYLOAD]], XSS_PAYLOAD),
            ([42], "42"),
            ([], "[]"),
            (["a", "b"], "[a,b]"),
            (["a", [1, None]], "[a,[1,null]]"),
            ({}, "{}"),
            ({"k": "v", "n": 1}, "{k:v,n:1}"),
            ({"k": [XSS_PAYLOAD]}, "{k:" + XSS_PAYLOAD + "}"),
        ],
    )
    def test_stringify(self, value, expected):
        assert stringify_username(value) == expected

    def test_non_json_value_rejected(self):
        with pytest.raises(TypeError):
            stringify_username(object())  # type: ignore[arg-type]

    def test_render_welcome_does_not_escape(self):
        assert render_welcome("<b>x</b>") == (
            "<h1>Thank you <b>x</b>, your account has been registered!</h1>"
        )

    def test_render_welcome_keeps_braces(self):
        assert render_welcome("{username}") == (
            "<h1>Thank you {username}, your account has been registered!</h1>"
        )


class TestRegisterVulnerableUser:
    """Tests for register_vulnerable_user."""

    def test_array_bypass(self):
        request = VulnerableSignupRequest(username=[XSS_PAYLOAD], password="x")

        result = register_vulnerable_user(request)

        assert result.status is SignupStatus.ACCEPTED
        assert XSS_PAYLOAD in result.body

    def test_string_with_markup_rejected(self):
        request = VulnerableSignupRequest(username=XSS_PAYLOAD, password="x")

        result = register_vulnerable_user(request)

        assert result == SignupResult(status=SignupStatus.REJECTED_VALIDATION)
        assert not result.accepted

    def test_plain_string(self):
        request = VulnerableSignupRequest(username="alice", password="x")

        result = register_vulnerable_user(request)

        assert result.accepted
        assert result.body == "<h1>Thank you alice, your account has been registered!</h1>"


class TestRegisterSecureUser:
    """Tests for register_secure_user."""

    def test_plain_string(self):
        result = register_secure_user(SecureSignupRequest(username="alice", password="x"))

        assert result.accepted
        assert result.body == "<h1>Thank you alice, your account has been registered!</h1>"

    def test_string_with_markup_rejected(self):
        result = register_secure_user(SecureSignupRequest(username=XSS_PAYLOAD, password="x"))

        assert result.status is SignupStatus.REJECTED_VALIDATION
        assert result.body == ""

    @pytest.mark.parametrize("username", ["bob", "x y", "ümlaut"])
    def test_matches_vulnerable_flow_for_plain_strings(self, username):
        secure = register_secure_user(SecureSignupRequest(username=username, password="x"))
        vulnerable = register_vulnerable_user(
            VulnerableSignupRequest(username=username, password="x")
        )

        assert secure == vulnerable
