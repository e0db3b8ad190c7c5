"""Unit tests for PipelineRunner."""

from __future__ import annotations

from pathlib import Path

import pytest

from svg_to_ts.core.exceptions import ConversionError, FilesystemError
from svg_to_ts.core.pipeline_runner import PipelineRunner
from svg_to_ts.core.state import ConversionResult, PipelineState
from svg_to_ts.models.options import ConversionOptions


class RecordingOrchestrator:
    def __init__(self, log: list[str], fail_for: set[str]):
        self.log = log
        self.fail_for = fail_for

    async def convert(self, options: ConversionOptions) -> ConversionResult:
        self.log.append(f"start {options.output_directory}")
        if options.output_directory in self.fail_for:
            raise ConversionError(PipelineState.CLEANING, FilesystemError("boom"))
        self.log.append(f"end {options.output_directory}")
        return ConversionResult(output_directory=Path(options.output_directory))


def make_runner(log: list[str], fail_for: set[str] | None = None):
    created = []

    def factory():
        orchestrator = RecordingOrchestrator(log, fail_for or set())
        created.append(orchestrator)
        return orchestrator

    return PipelineRunner(factory), created


def test_runs_each_conversion_in_order_with_fresh_orchestrator():
    log: list[str] = []
    runner, created = make_runner(log)

    results = runner.execute(
        [ConversionOptions(output_directory="a"), ConversionOptions(output_directory="b")]
    )

    assert [r.output_directory for r in results] == [Path("a"), Path("b")]
    assert log == ["start a", "end a", "start b", "end b"]
    assert len(created) == 2 and created[0] is not created[1]


def test_first_failure_stops_the_runner():
    log: list[str] = []
    runner, _ = make_runner(log, fail_for={"a"})

    with pytest.raises(ConversionError) as excinfo:
        runner.execute(
            [
                ConversionOptions(output_directory="a"),
                ConversionOptions(output_directory="b"),
            ]
        )

    assert excinfo.value.stage is PipelineState.CLEANING
    assert log == ["start a"]


def test_empty_configuration_rejected():
    runner, _ = make_runner([])
    with pytest.raises(ValueError, match="No conversion configured"):
        runner.execute([])


def test_conversion_mode_selects_the_factory():
    log: list[str] = []
    picked: list[str] = []

    def multi():
        picked.append("multi")
        return RecordingOrchestrator(log, set())

    def single():
        picked.append("single")
        return RecordingOrchestrator(log, set())

    runner = PipelineRunner(multi, single)
    runner.execute(
        [
            ConversionOptions(output_directory="a"),
            ConversionOptions(output_directory="b", optimize_for_lazy_loading=False),
            ConversionOptions(output_directory="c"),
        ]
    )

    assert picked == ["multi", "single", "multi"]
    assert log == ["start a", "end a", "start b", "end b", "start c", "end c"]


def test_single_file_mode_without_factory_rejected():
    runner, created = make_runner([])
    with pytest.raises(ValueError, match="No single-file converter"):
        runner.execute([ConversionOptions(optimize_for_lazy_loading=False)])
    assert created == []
