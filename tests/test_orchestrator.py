"""
Tests for the image generation run (prompt building, sequential calls, outcomes).
"""
from __future__ import annotations

import logging

import pytest

from core.orchestrator import (
    MSG_BAD_COUNT,
    MSG_MISSING_INPUT,
    MSG_NO_IMAGES,
    MSG_STYLE_NOT_FOUND,
    MSG_UNEXPECTED,
    GenerationOrchestrator,
    OutcomeStatus,
    ValidationError,
    build_base_prompt,
    validate_request,
)
from core.styles import find_style


@pytest.fixture
def cartoon():
    return find_style("cartoon")


def test_sunset_drive_all_calls_succeed(fake_client, cartoon) -> None:
    outcome = GenerationOrchestrator(fake_client).run("Sunset Drive", cartoon, 3)

    assert outcome.status is OutcomeStatus.FULL
    assert outcome.ok
    assert len(outcome.images) == 3
    assert [p.rsplit(". ", 1)[-1] for p in fake_client.prompts] == [
        "Variation 1.",
        "Variation 2.",
        "Variation 3.",
    ]
    for p in fake_client.prompts:
        assert p.endswith(".")
        assert 'song titled "Sunset Drive"' in p
        assert cartoon.prompt_suffix in p


def test_prompt_format_is_stable(cartoon) -> None:
    assert build_base_prompt("Sunset Drive", cartoon) == (
        'Generate an image for a song titled "Sunset Drive" '
        "as a vibrant 2D cartoon drawing, clean lines, bold colors"
    )


@pytest.mark.parametrize("count", [1, 2, 5])
def test_client_called_exactly_count_times_with_distinct_prompts(make_client, cartoon, count) -> None:
    client = make_client()
    GenerationOrchestrator(client).run("Night Ride", cartoon, count)

    assert len(client.prompts) == count
    assert len(set(client.prompts)) == count


def test_all_calls_fail_yields_failed_outcome(make_client, cartoon) -> None:
    client = make_client([None, None, None])
    outcome = GenerationOrchestrator(client).run("Night Ride", cartoon, 3)

    assert outcome.status is OutcomeStatus.FAILED
    assert not outcome.ok
    assert outcome.images == ()
    assert outcome.message == MSG_NO_IMAGES
    assert len(client.prompts) == 3


def test_partial_success_keeps_call_order(make_client, cartoon, caplog) -> None:
    client = make_client(["img-1", None, "img-3", None])

    with caplog.at_level(logging.WARNING, logger="core.orchestrator"):
        outcome = GenerationOrchestrator(client).run("Night Ride", cartoon, 4)

    assert outcome.status is OutcomeStatus.PARTIAL
    assert outcome.images == ("img-1", "img-3")
    assert len(client.prompts) == 4
    assert "Failed to generate image 2." in caplog.text
    assert "Failed to generate image 4." in caplog.text


def test_failure_does_not_abort_loop(make_client, cartoon) -> None:
    client = make_client([None, "img-2"])
    outcome = GenerationOrchestrator(client).run("Night Ride", cartoon, 2)

    assert outcome.images == ("img-2",)
    assert len(client.prompts) == 2


def test_unexpected_exception_becomes_failed_outcome(make_client, cartoon) -> None:
    client = make_client(["img-1", RuntimeError("boom"), "img-3"])
    outcome = GenerationOrchestrator(client).run("Night Ride", cartoon, 3)

    assert outcome.status is OutcomeStatus.FAILED
    assert outcome.images == ()
    assert outcome.message == MSG_UNEXPECTED


def test_progress_reported_before_each_call(fake_client, cartoon) -> None:
    seen = []
    GenerationOrchestrator(fake_client).run("Night Ride", cartoon, 3, progress=lambda i, n: seen.append((i, n)))
    assert seen == [(1, 3), (2, 3), (3, 3)]


@pytest.mark.parametrize("count", [0, -2])
def test_count_below_one_yields_failed_outcome(fake_client, cartoon, count) -> None:
    outcome = GenerationOrchestrator(fake_client).run("Night Ride", cartoon, count)

    assert outcome.status is OutcomeStatus.FAILED
    assert outcome.images == ()
    assert outcome.message == MSG_BAD_COUNT
    assert fake_client.prompts == []


def test_validate_request_trims_title() -> None:
    request = validate_request("  Sunset Drive \n", "cartoon")
    assert request.song_title == "Sunset Drive"
    assert request.style.id == "cartoon"


@pytest.mark.parametrize("title", ["", "   ", None])
def test_empty_title_is_a_validation_error(title) -> None:
    with pytest.raises(ValidationError, match=MSG_MISSING_INPUT):
        validate_request(title, "cartoon")


def test_missing_style_is_a_validation_error() -> None:
    with pytest.raises(ValidationError, match=MSG_MISSING_INPUT):
        validate_request("Sunset Drive", None)


def test_unknown_style_is_a_validation_error() -> None:
    with pytest.raises(ValidationError, match=MSG_STYLE_NOT_FOUND):
        validate_request("Sunset Drive", "watercolor")


def test_run_request_uses_validated_title(fake_client) -> None:
    request = validate_request("  Sunset Drive  ", "crayon")
    outcome = GenerationOrchestrator(fake_client).run_request(request, 2)

    assert outcome.status is OutcomeStatus.FULL
    assert all('titled "Sunset Drive"' in p for p in fake_client.prompts)
