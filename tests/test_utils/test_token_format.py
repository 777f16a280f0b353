import unittest
from datetime import datetime, timedelta, timezone

import jwt

from hotel_client.utils.token_format import is_token_expired, is_valid_jwt_format


def make_token(**claims) -> str:
    return jwt.encode(claims or {"userId": "u1"}, "testsecret", algorithm="HS256")


class TestJwtFormat(unittest.TestCase):
    def test_real_token_is_valid(self):
        self.assertTrue(is_valid_jwt_format(make_token(userId="u1")))

    def test_missing_or_non_string(self):
        self.assertFalse(is_valid_jwt_format(None))
        self.assertFalse(is_valid_jwt_format(""))
        self.assertFalse(is_valid_jwt_format(12345))

    def test_wrong_number_of_segments(self):
        token = make_token()
        header, payload, signature = token.split(".")
        self.assertFalse(is_valid_jwt_format(f"{header}.{payload}"))
        self.assertFalse(is_valid_jwt_format(f"{token}.{signature}"))
        self.assertFalse(is_valid_jwt_format("null"))
        self.assertFalse(is_valid_jwt_format("undefined"))

    def test_empty_segment(self):
        header, payload, _ = make_token().split(".")
        self.assertFalse(is_valid_jwt_format(f"{header}.{payload}."))

    def test_non_base64url_characters(self):
        header, payload, signature = make_token().split(".")
        self.assertFalse(is_valid_jwt_format(f"{header}.{payload}!.{signature}"))
        self.assertFalse(is_valid_jwt_format(f"{header}.pay+load.{signature}"))

    def test_undecodable_length(self):
        header, _, signature = make_token().split(".")
        self.assertFalse(is_valid_jwt_format(f"{header}.abcde.{signature}"))


class TestTokenExpiry(unittest.TestCase):
    def test_future_expiry(self):
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        self.assertFalse(is_token_expired(make_token(userId="u1", exp=exp)))

    def test_past_expiry(self):
        exp = datetime.now(timezone.utc) - timedelta(minutes=1)
        self.assertTrue(is_token_expired(make_token(userId="u1", exp=exp)))

    def test_explicit_now(self):
        exp = datetime(2025, 1, 1, tzinfo=timezone.utc)
        token = make_token(userId="u1", exp=exp)
        self.assertFalse(is_token_expired(token, now=datetime(2024, 12, 31, tzinfo=timezone.utc)))
        self.assertTrue(is_token_expired(token, now=datetime(2025, 1, 2, tzinfo=timezone.utc)))

    def test_no_exp_claim(self):
        self.assertFalse(is_token_expired(make_token(userId="u1")))

    def test_unreadable_claims_count_as_expired(self):
        self.assertTrue(is_token_expired("aaaa.bbbb.cccc"))


if __name__ == "__main__":
    unittest.main()
