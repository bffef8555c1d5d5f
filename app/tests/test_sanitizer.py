"""
Tests for form field sanitization.
"""

import pytest

from app.core.sanitizer import MALICIOUS_TAG_REMOVED, SCRIPT_REMOVED, sanitize


def test_sanitize_empty_input():
    """Test empty and missing values sanitize to an empty string."""
    assert sanitize("") == ""
    assert sanitize(None) == ""


def test_sanitize_plain_text_unchanged():
    """Test ordinary text passes through untouched."""
    assert sanitize("Hello, world") == "Hello, world"


@pytest.mark.parametrize(
    "text",
    [
        "<script>alert(1)</script>",
        "<SCRIPT>alert(1)</SCRIPT>",
        '<Script type="text/javascript">steal()</sCrIpT>',
    ],
)
def test_sanitize_removes_script_blocks(text):
    """Test script blocks are replaced by the marker in any letter case."""
    result = sanitize(f"before {text} after")

    assert result == f"before {SCRIPT_REMOVED} after"
    assert "<script" not in result.lower()


def test_sanitize_removes_event_handler_tags():
    """Test tags carrying on* attributes are replaced by the marker."""
    result = sanitize('<img src="x" onerror="alert(1)">')

    assert result == MALICIOUS_TAG_REMOVED


def test_sanitize_escapes_special_characters():
    """Test the five HTML special characters are entity-escaped."""
    assert sanitize("<b>\"Tom\" & 'Jerry'</b>") == "&lt;b&gt;&quot;Tom&quot; &amp; &#39;Jerry&#39;&lt;/b&gt;"


def test_sanitize_strips_before_escaping():
    """Test markers survive escaping and no raw special characters remain."""
    result = sanitize("<script>x</script> & <div onclick=go()>hi</div>")

    assert result == f"{SCRIPT_REMOVED} &amp; {MALICIOUS_TAG_REMOVED}hi&lt;/div&gt;"
    for char in "<>\"'":
        assert char not in result


def test_sanitize_script_on_multiple_lines_is_escaped():
    """Test a script block spanning lines is not stripped but still neutralized by escaping."""
    result = sanitize("<script>\nalert(1)\n</script>")

    assert "<" not in result
    assert "&lt;script&gt;" in result
