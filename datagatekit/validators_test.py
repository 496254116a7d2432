import pytest
from datagatekit.enums import FilterRejectReason
from datagatekit.exceptions import FilterRejectedError
from datagatekit.validators import validate_email, validate_password, validate_where_clause


@pytest.mark.parametrize("clause", [None, "", "amount > 500", "dropdown", "created_by", "Customer 12", "executive"])
def test_safe_filters_pass(clause):
    validate_where_clause(clause)


@pytest.mark.parametrize("clause,pattern", [
    ("status = 'x'; select 1", ";"),
    ("abc--", "--"),
    ("/* hi */", "/*"),
    ("drop it -- later", "--"),
])
def test_comment_patterns_rejected_anywhere(clause, pattern):
    with pytest.raises(FilterRejectedError) as exc_info:
        validate_where_clause(clause)
    assert exc_info.value.reason == FilterRejectReason.COMMENT_PATTERN
    assert exc_info.value.pattern == pattern
    assert pattern in str(exc_info.value)


@pytest.mark.parametrize("clause,keyword", [
    ("DROP", "DROP"),
    ("please drop table", "DROP"),
    ("x OR Delete", "DELETE"),
    ("exec(sp)", "EXEC"),
    ("name='a' truncate", "TRUNCATE"),
])
def test_forbidden_keywords_rejected_as_whole_words(clause, keyword):
    with pytest.raises(FilterRejectedError) as exc_info:
        validate_where_clause(clause)
    assert exc_info.value.reason == FilterRejectReason.FORBIDDEN_KEYWORD
    assert exc_info.value.pattern == keyword


def test_comment_check_runs_before_keywords():
    with pytest.raises(FilterRejectedError) as exc_info:
        validate_where_clause("DROP;")
    assert exc_info.value.reason == FilterRejectReason.COMMENT_PATTERN


def test_email_validation():
    assert validate_email("a@x.com") == "a@x.com"
    with pytest.raises(ValueError, match="empty"):
        validate_email("")
    with pytest.raises(ValueError, match="Invalid"):
        validate_email("a@x")


def test_password_validation():
    assert validate_password("12345678") == "12345678"
    with pytest.raises(ValueError, match="empty"):
        validate_password("")
    with pytest.raises(ValueError, match="empty"):
        validate_password(None)
    with pytest.raises(ValueError, match="at least 8"):
        validate_password("1234567")
