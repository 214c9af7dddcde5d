from anchors.linker.left_shift import common_padding, left_shift


def test_common_indent_removed():
    assert left_shift("  one\n  two") == "one\ntwo"


def test_shortest_padding_wins():
    assert left_shift("    a\n  b\n      c") == "  a\nb\n    c"


def test_empty_lines_ignored():
    assert left_shift(" one\n\n  two") == "one\n\n two"


def test_no_padding_is_identity():
    text = "a\n  b\n"
    assert left_shift(text) == text


def test_mismatched_prefix_kept():
    assert left_shift("\tx\n  y\n  z") == "x\n  y\n  z"
    assert left_shift("  x\n\t  y") == "x\n\t  y"


def test_common_padding():
    assert common_padding("") == ""
    assert common_padding("   a\n  b") == "  "
