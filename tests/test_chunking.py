import pytest

from quagga.chunking import (
    calculate_part_overhead,
    replace_placeholders,
    split_file_by_lines,
)
from quagga.template import PartTemplate


def test_split_file_by_lines_empty_content():
    assert split_file_by_lines("", 10) == []


def test_split_file_by_lines_single_line_fits():
    assert split_file_by_lines("1234567890", 10) == ["1234567890"]


def test_split_file_by_lines_single_line_exceeds():
    content = "This line is definitely longer than the maximum chunk size."
    assert split_file_by_lines(content, 10) == [content]


def test_split_file_by_lines_multiple_lines_fit_one_chunk():
    content = "Line1\nLine2\nLine3"
    assert split_file_by_lines(content, 20) == ["Line1\nLine2\nLine3"]


def test_split_file_by_lines_each_line_separate_chunks():
    content = "Short\nAnother Short\nYet Another Short"
    assert split_file_by_lines(content, 10) == [
        "Short",
        "Another Short",
        "Yet Another Short",
    ]


def test_split_file_first_two_lines_fit_one_chunk_exactly():
    content = "12345\n67890\nabsde"
    assert split_file_by_lines(content, 12) == ["12345\n67890", "absde"]


def test_split_file_by_lines_zero_max_chunk_size():
    assert split_file_by_lines("Line1\nLine2", 0) == ["Line1", "Line2"]


def test_split_file_by_lines_max_chunk_smaller_than_any_line():
    content = "Short\nMedium Length\nLonger Line Than Max"
    assert split_file_by_lines(content, 5) == [
        "Short",
        "Medium Length",
        "Longer Line Than Max",
    ]


def test_split_file_by_lines_multiple_consecutive_newlines():
    content = "Line1\n\nLine3\n\n\n\n\nLine6"
    assert split_file_by_lines(content, 15) == ["Line1\n\nLine3\n\n", "\n\nLine6"]


def test_split_file_by_lines_all_empty_lines():
    assert split_file_by_lines("\n\n\n", 2) == ["\n", ""]


def test_split_file_by_lines_mixed_line_lengths():
    content = (
        "Short\n"
        "This line is quite long and exceeds the chunk size.\n"
        "Mid\n"
        "Another long line that should be split properly."
    )
    assert split_file_by_lines(content, 30) == [
        "Short",
        "This line is quite long and exceeds the chunk size.",
        "Mid",
        "Another long line that should be split properly.",
    ]


def test_split_file_by_lines_lines_exactly_max_size():
    content = "1234567890\nabcdefghij\nABCDEFGHIJ"
    assert split_file_by_lines(content, 11) == [
        "1234567890",
        "abcdefghij",
        "ABCDEFGHIJ",
    ]


def test_split_file_by_lines_crlf_line_endings():
    assert split_file_by_lines("a\r\nb\r\n", 10) == ["a\nb"]


def test_split_file_by_lines_trailing_newline_adds_no_line():
    assert split_file_by_lines("abc\n", 10) == ["abc"]


@pytest.mark.parametrize("size", [1, 5, 12, 40])
def test_split_file_by_lines_preserves_all_lines(size):
    content = "alpha\nbeta\n\ngamma delta\nepsilon"
    chunks = split_file_by_lines(content, size)
    assert "\n".join(chunks) == content


def test_calculate_part_overhead_empty_template():
    assert calculate_part_overhead(PartTemplate()) == 2


def test_calculate_part_overhead_plain_texts():
    template = PartTemplate(header="abc", footer="abc", pending="abc")
    assert calculate_part_overhead(template) == 12


def test_calculate_part_overhead_skips_empty_pending():
    template = PartTemplate(header="abc", footer="abc", pending="")
    assert calculate_part_overhead(template) == 8


def test_calculate_part_overhead_estimates_placeholders_as_three_digits():
    template = PartTemplate(
        header="<part-number>",
        footer="<total-parts>",
        pending="<parts-remaining>",
    )
    assert calculate_part_overhead(template) == 12


def test_replace_placeholders_all_tags():
    text = "Part <part-number> of <total-parts>, <parts-remaining> left"
    assert replace_placeholders(text, 1, 3) == "Part 1 of 3, 2 left"


def test_replace_placeholders_last_part_has_none_remaining():
    assert replace_placeholders("<parts-remaining>", 3, 3) == "0"


def test_replace_placeholders_remaining_never_negative():
    assert replace_placeholders("<parts-remaining>", 5, 3) == "0"


def test_replace_placeholders_text_without_tags_unchanged():
    assert replace_placeholders("no tags here", 2, 4) == "no tags here"


def test_replace_placeholders_repeated_tags():
    assert replace_placeholders("<part-number>/<part-number>", 7, 9) == "7/7"