from datetime import datetime

import pytest

from extraction.task_extractor import ExtractionResult, TaskExtractor, parse_extraction
from llm.llm_client import LLMClient
from tasker.errors import ExtractionFailedError, MissingTaskNameError


SAMPLE = """Here is the extracted information:

* Task name: Buy a birthday gift
* Due date: 12/25/2025
* Category color: Red
"""


def test_parse_full_response():
    result = parse_extraction(SAMPLE)
    assert result.name == "Buy a birthday gift"
    assert result.due_date == datetime(2025, 12, 25, 23, 59, 0)
    assert result.category == "red"


@pytest.mark.parametrize("line", [
    "* Task name:   Water plants  ",
    "* TASK NAME: Water plants",
    "   * task name: Water plants",
])
def test_task_name_marker_case_insensitive(line):
    assert parse_extraction(line).name == "Water plants"


def test_task_name_value_keeps_casing():
    assert parse_extraction("* task name: CALL Mom").name == "CALL Mom"


def test_invalid_due_date_is_dropped():
    result = parse_extraction("* Task name: Plan trip\n* Due date: 13/45/2025")
    assert result.due_date is None
    task = result.to_task()
    assert task.name == "Plan trip"
    assert task.due_date is None


def test_due_date_without_zero_padding():
    result = parse_extraction("* due date: 1/5/2026")
    assert result.due_date == datetime(2026, 1, 5, 23, 59)


@pytest.mark.parametrize("line,expected", [
    ("Color: Blue", "blue"),
    ("* Category color: GREEN", "green"),
    ("color: yellow", "yellow"),
    ("Color: purple", "yellow"),
    ("Color:", "yellow"),
])
def test_color_resolution(line, expected):
    assert parse_extraction(line).category == expected


def test_missing_color_defaults_to_yellow():
    assert parse_extraction("* Task name: X").category == "yellow"


def test_last_occurrence_wins():
    text = "\n".join([
        "* Task name: First",
        "* Due date: 01/01/2026",
        "Color: red",
        "* Task name: Second",
        "* Due date: 02/02/2026",
        "Color: purple",
    ])
    result = parse_extraction(text)
    assert result.name == "Second"
    assert result.due_date == datetime(2026, 2, 2, 23, 59)
    assert result.category == "yellow"


def test_later_bad_date_clears_earlier_one():
    result = parse_extraction("* Due date: 01/01/2026\n* Due date: soon")
    assert result.due_date is None


def test_unrecognised_lines_are_ignored():
    result = parse_extraction("Sure!\nTask: nope\n- Due: 01/01/2026\n* Task name: Real")
    assert result.name == "Real"
    assert result.due_date is None


def test_name_line_containing_color_is_a_name():
    result = parse_extraction("* Task name: Pick paint color: teal")
    assert result.name == "Pick paint color: teal"
    assert result.category == "yellow"


def test_missing_name_fails():
    result = parse_extraction("* Due date: 12/25/2025\nColor: blue")
    with pytest.raises(MissingTaskNameError) as exc:
        result.to_task()
    assert exc.value.user_message == "Task name is missing."


def test_empty_name_line_counts_as_missing():
    with pytest.raises(MissingTaskNameError):
        parse_extraction("* Task name: Real\n* Task name:   ").to_task()


def test_to_task_shape():
    task = ExtractionResult(name="Read", due_date=datetime(2025, 5, 1, 23, 59), category="green").to_task()
    assert task.begin_time is None and task.end_time is None
    assert task.days is None
    assert task.is_completed is False
    assert task.category == "green"


def test_extractor_end_to_end(fake_provider_factory):
    provider = fake_provider_factory(SAMPLE)
    extractor = TaskExtractor(llm_client=LLMClient(provider=provider))
    task = extractor.extract("buy a gift for christmas")
    assert task.name == "Buy a birthday gift"
    assert task.category == "red"
    assert provider.calls[0]["user"] == "buy a gift for christmas"


def test_extractor_missing_name(fake_provider_factory):
    extractor = TaskExtractor(llm_client=LLMClient(provider=fake_provider_factory("I could not help.")))
    with pytest.raises(MissingTaskNameError):
        extractor.extract("???")


def test_extractor_propagates_extraction_failure(fake_provider_factory):
    extractor = TaskExtractor(llm_client=LLMClient(provider=fake_provider_factory("   ")))
    with pytest.raises(ExtractionFailedError):
        extractor.extract("anything")


@pytest.mark.parametrize("line,expected", [
    ("İSTANBUL İŞ color: Blue", "blue"),
    ("* İş kategorisi COLOR: green", "green"),
])
def test_color_after_non_ascii_text(line, expected):
    assert parse_extraction(line).category == expected


def test_non_ascii_values_are_kept_whole():
    result = parse_extraction("* Task name: İzmir trip\n* Due date: 03/04/2026\nİ color: Red")
    assert result.name == "İzmir trip"
    assert result.due_date == datetime(2026, 3, 4, 23, 59)
    assert result.category == "red"
