"""Tests for smart_renamer.core.conventions: segmentation, membership and joins."""

import pytest

from smart_renamer.core.conventions import (
    base_name,
    classify_name,
    convert_name,
    extension,
    join_words,
    matches_convention,
    matching_conventions,
    segment_words,
)
from smart_renamer.core.enums import NamingConvention, parse_convention


ALL_CONVENTIONS = list(NamingConvention)


# ===========================================================================
# segment_words
# ===========================================================================

class TestSegmentWords:
    def test_camel_case(self):
        assert segment_words("userName") == ["user", "name"]

    def test_pascal_case(self):
        assert segment_words("GetUserId") == ["get", "user", "id"]

    def test_separators(self):
        assert segment_words("user_name-first last") == ["user", "name", "first", "last"]

    def test_upper_snake_lowercased(self):
        assert segment_words("API_URL") == ["api", "url"]

    def test_digit_before_upper_is_boundary(self):
        assert segment_words("v2Api") == ["v2", "api"]
        assert segment_words("base64Encode") == ["base64", "encode"]

    def test_all_caps_only_splits_on_separators(self):
        assert segment_words("USER_2FA") == ["user", "2fa"]
        assert segment_words("HTTP2") == ["http2"]

    def test_repeated_separators_dropped(self):
        assert segment_words("__user--name__") == ["user", "name"]

    @pytest.mark.parametrize("name", ["", "_", "-", "__--  "])
    def test_empty_or_boundary_only(self, name):
        assert segment_words(name) == []


# ===========================================================================
# matches_convention / classify_name
# ===========================================================================

class TestMembership:
    @pytest.mark.parametrize(
        "name,convention",
        [
            ("userName", NamingConvention.CAMEL),
            ("user_name", NamingConvention.SNAKE),
            ("user-name", NamingConvention.KEBAB),
            ("UserName", NamingConvention.PASCAL),
            ("USER_NAME", NamingConvention.UPPER_SNAKE),
        ],
    )
    def test_matches(self, name, convention):
        assert matches_convention(name, convention)

    def test_whole_string_must_match(self):
        assert not matches_convention("userName!", NamingConvention.CAMEL)
        assert not matches_convention("user_Name", NamingConvention.SNAKE)

    def test_empty_matches_nothing(self):
        assert not any(matches_convention("", c) for c in ALL_CONVENTIONS)

    def test_single_lowercase_word_is_ambiguous(self):
        assert matching_conventions("user") == [
            NamingConvention.CAMEL,
            NamingConvention.SNAKE,
            NamingConvention.KEBAB,
        ]

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("MAX", NamingConvention.UPPER_SNAKE),
            ("User", NamingConvention.PASCAL),
            ("user", NamingConvention.CAMEL),
            ("user_name", NamingConvention.SNAKE),
            ("user-name", NamingConvention.KEBAB),
            ("User_name", None),
            ("", None),
        ],
    )
    def test_classify_name_prefers_most_specific(self, name, expected):
        assert classify_name(name) == expected


# ===========================================================================
# join_words / convert_name
# ===========================================================================

class TestConvert:
    def test_user_name_to_camel(self):
        assert convert_name("user_name", NamingConvention.CAMEL) == "userName"

    def test_api_url_to_kebab(self):
        assert convert_name("API_URL", NamingConvention.KEBAB) == "api-url"

    @pytest.mark.parametrize(
        "convention,expected",
        [
            (NamingConvention.CAMEL, "getUserId"),
            (NamingConvention.SNAKE, "get_user_id"),
            (NamingConvention.KEBAB, "get-user-id"),
            (NamingConvention.PASCAL, "GetUserId"),
            (NamingConvention.UPPER_SNAKE, "GET_USER_ID"),
        ],
    )
    def test_join_each_convention(self, convention, expected):
        assert join_words(["get", "user", "id"], convention) == expected

    def test_join_empty_sequence(self):
        assert all(join_words([], c) == "" for c in ALL_CONVENTIONS)

    def test_convert_empty_name(self):
        assert all(convert_name("", c) == "" for c in ALL_CONVENTIONS)

    def test_join_accepts_raw_token(self):
        assert join_words(["a", "b"], "kebab-case") == "a-b"

    def test_join_unknown_convention(self):
        with pytest.raises(ValueError):
            join_words(["a"], "Train-Case")

    @pytest.mark.parametrize(
        "name",
        ["user_name", "XMLHttpRequest", "base64_encode", "user_2fa", "v2Api", "MAX_RETRY", "x"],
    )
    def test_idempotent(self, name):
        for convention in ALL_CONVENTIONS:
            once = convert_name(name, convention)
            assert convert_name(once, convention) == once

    def test_adjacent_single_letter_words_merge_on_reconvert(self):
        # Capitalized one-letter words join into an acronym-shaped run.
        assert convert_name("get_x_y", NamingConvention.CAMEL) == "getXY"
        assert segment_words("getXY") == ["get", "xy"]
        assert convert_name("getXY", NamingConvention.CAMEL) == "getXy"
        assert convert_name("x_y", NamingConvention.PASCAL) == "XY"
        assert convert_name("XY", NamingConvention.PASCAL) == "Xy"

    def test_single_letter_words_stable_with_separators(self):
        separated = (NamingConvention.SNAKE, NamingConvention.KEBAB, NamingConvention.UPPER_SNAKE)
        for convention in separated:
            once = convert_name("get_x_y", convention)
            assert convert_name(once, convention) == once

    @pytest.mark.parametrize("words", [["get", "user", "id"], ["v2", "api"], ["id"]])
    def test_round_trip(self, words):
        for convention in ALL_CONVENTIONS:
            assert segment_words(join_words(words, convention)) == words


# ===========================================================================
# base_name / extension / parse_convention
# ===========================================================================

class TestFileNameParts:
    def test_strips_last_extension_only(self):
        assert base_name("user.test.ts") == "user.test"
        assert extension("user.test.ts") == ".ts"

    def test_leading_dot_is_not_extension(self):
        assert base_name(".gitignore") == ".gitignore"
        assert extension(".gitignore") == ""

    def test_no_extension(self):
        assert base_name("Makefile") == "Makefile"
        assert extension("Makefile") == ""


class TestParseConvention:
    def test_valid_token(self):
        assert parse_convention(" snake_case ") is NamingConvention.SNAKE

    def test_invalid_token_lists_options(self):
        with pytest.raises(ValueError, match="Valid options: camelCase"):
            parse_convention("Train-Case")
